"""Tests for the render pass, against a recording surface."""
from frogger.entities import AVATAR_SPRITES, ENEMY_SPRITE, GEM_SPRITE, Gem
from frogger.game import START_MESSAGE, Game
from frogger.render import ASSET_URLS, ROW_IMAGES, START_IMAGE, TEXT_Y, render


class FakeSurface:
    def __init__(self):
        self.calls = []

    def draw_image(self, handle, x, y):
        self.calls.append(("image", handle, x, y))

    def fill_text(self, text, x, y):
        self.calls.append(("text", text, x, y))


class FakeCache:
    """Hands back the URL itself as the image handle."""

    def load(self, urls):
        pass

    def on_ready(self, callback):
        callback()

    def get(self, url):
        return url


def draw(game):
    surface = FakeSurface()
    render(game.state, surface, FakeCache())
    return surface.calls


def playing_game():
    game = Game(seed=3)
    game.click(250, 500)
    game.step(16)
    return game


class TestStage:
    def test_tiles_cover_the_grid(self):
        calls = draw(Game(seed=1))
        tiles = calls[:30]
        assert tiles[0] == ("image", ROW_IMAGES[0], 0, 0)
        assert tiles[5] == ("image", "images/stone-block.png", 0, 83)
        assert tiles[-1] == ("image", "images/grass-block.png", 404, 415)
        assert {c[1] for c in tiles[:5]} == {"images/water-block.png"}

    def test_asset_list_covers_every_drawn_image(self):
        urls = set(ASSET_URLS)
        assert set(ROW_IMAGES) <= urls
        assert set(AVATAR_SPRITES) <= urls
        assert {ENEMY_SPRITE, GEM_SPRITE, START_IMAGE} <= urls


class TestIntro:
    def test_avatars_then_start_image(self):
        calls = draw(Game(seed=1))
        picker = calls[30:]
        assert picker[:5] == [
            ("image", url, index * 101, 400) for index, url in enumerate(AVATAR_SPRITES)
        ]
        assert picker[5] == ("image", START_IMAGE, 0, 0)
        assert len(picker) == 6

    def test_no_text_on_intro(self):
        assert not [c for c in draw(Game(seed=1)) if c[0] == "text"]


class TestPlaying:
    def test_draw_order(self):
        game = playing_game()
        calls = draw(game)[30:]
        kinds = [c[1] if c[0] == "image" else "text" for c in calls]
        assert kinds == [ENEMY_SPRITE, "text", AVATAR_SPRITES[2]]
        assert calls[1] == ("text", START_MESSAGE, 252.5, TEXT_Y)
        player = game.state.player
        assert calls[-1] == ("image", AVATAR_SPRITES[2], player.x, player.y)

    def test_gem_drawn_between_enemies_and_text(self):
        game = playing_game()
        gem = Gem.on_tile(1, 2, game.config)
        game.state.gems.gem = gem
        calls = draw(game)[30:]
        assert calls[1] == ("image", GEM_SPRITE, gem.x, gem.y)
        assert calls[2][0] == "text"

    def test_enemy_positions_follow_state(self):
        game = playing_game()
        enemy = game.state.roster[0]
        enemy.x, enemy.y = 123.0, 60.0
        calls = draw(game)[30:]
        assert calls[0] == ("image", ENEMY_SPRITE, 123.0, 60.0)
