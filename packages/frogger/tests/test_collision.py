"""Tests for overlap checks and the collision system."""
from frogger import signals
from frogger.collision import boxes_overlap, collides, on_same_tile
from frogger.config import GameConfig
from frogger.entities import AVATAR_SPRITES, Enemy, Gem, Player
from frogger.game import Game
from frogger.session import SessionState

CONFIG = GameConfig()


def test_overlapping_boxes():
    assert boxes_overlap(0, 0, 10, 10, 5, 5, 10, 10)
    assert boxes_overlap(5, 5, 10, 10, 0, 0, 10, 10)


def test_contained_box_overlaps():
    assert boxes_overlap(0, 0, 100, 100, 40, 40, 5, 5)


def test_touching_edges_do_not_overlap():
    assert not boxes_overlap(0, 0, 10, 10, 10, 0, 10, 10)
    assert not boxes_overlap(0, 0, 10, 10, 0, 10, 10, 10)


def test_overlap_needs_both_axes():
    # x intervals overlap, y do not
    assert not boxes_overlap(0, 0, 10, 10, 5, 20, 10, 10)
    # y intervals overlap, x do not
    assert not boxes_overlap(0, 0, 10, 10, 20, 5, 10, 10)


def test_enemy_hits_player_on_its_lane():
    player = Player.at_spawn(AVATAR_SPRITES[0], CONFIG)
    player.col, player.row, player.y = 2, 3, CONFIG.tile_y(3)
    enemy = Enemy(lane=2, x=player.x - 50, y=CONFIG.lane_y(2), speed=60, baseline=65)
    assert collides(enemy, player)
    enemy.x = player.x - enemy.width
    assert not collides(enemy, player)


def test_gem_uses_tile_equality():
    player = Player.at_spawn(AVATAR_SPRITES[0], CONFIG)
    gem = Gem.on_tile(2, 5, CONFIG)
    assert on_same_tile(player, gem)
    # Jitter moves pixels, not the tile
    player.x += 2
    assert on_same_tile(player, gem)
    assert not on_same_tile(player, Gem.on_tile(1, 5, CONFIG))


class TestCollisionSystem:
    def _playing_game(self) -> Game:
        game = Game(seed=3)
        game.click(250, 500)
        game.step(16)
        assert game.session is SessionState.PLAYING
        return game

    def _record(self, game: Game, name: str) -> list:
        seen = []
        game.bus.subscribe(name, lambda n, d: seen.append(d))
        return seen

    def test_reports_one_hit_per_tick(self):
        game = self._playing_game()
        hits = self._record(game, signals.PLAYER_HIT)
        player = game.state.player
        for _ in range(2):
            game.state.roster.add(game.engine.random)
        for enemy in game.state.roster:
            enemy.x, enemy.y, enemy.speed = player.x, player.y, 0
        game.step(32)
        assert len(hits) == 1
        assert game.session is SessionState.DEATH_PAUSE

    def test_no_hits_outside_play(self):
        game = self._playing_game()
        hits = self._record(game, signals.PLAYER_HIT)
        game.state.collisions_enabled = False
        enemy = game.state.roster[0]
        enemy.x, enemy.y, enemy.speed = game.state.player.x, game.state.player.y, 0
        game.step(32)
        assert hits == []
        assert game.session is SessionState.PLAYING
