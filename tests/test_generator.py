"""Tests for maze carving and the connectivity guarantor."""

import pytest

from kiwimaze.domain.generator import MazeGenerator
from kiwimaze.domain.guarantor import (
    REPAIR_ASTAR, REPAIR_DIRECT, REPAIR_NONE, ConnectivityGuarantor, carve_direct_path
)
from kiwimaze.domain.path import is_contiguous_path
from kiwimaze.domain.reachability import is_reachable, reachable_region
from kiwimaze.domain.types import Cell, GameConfig, MazeGrid
from kiwimaze.utils.rng import SeededRNG

NO_EXTRAS = GameConfig(extra_openings=(0, 0), extra_paths=(0, 0))


def lattice_cells(size):
    return [(x, y) for y in range(1, size - 1, 2) for x in range(1, size - 1, 2)]


class TestMazeGenerator:
    def test_lattice_spans_every_odd_cell(self, rng):
        generator = MazeGenerator(rng, NO_EXTRAS)
        grid = MazeGrid(12)
        carved = generator.carve_lattice(grid, (1, 1))

        # Odd interior coordinates 1..9 on a 12 grid
        assert carved == 25
        region = reachable_region(grid, (1, 1))
        assert set(lattice_cells(12)) <= region

    def test_lattice_is_a_spanning_tree(self, rng):
        generator = MazeGenerator(rng, NO_EXTRAS)
        grid = MazeGrid(12)
        carved = generator.carve_lattice(grid, (1, 1))
        # Each lattice cell after the first opens exactly one wall
        assert grid.path_count() == 2 * carved - 1

    def test_border_stays_wall(self, rng):
        grid = MazeGenerator(rng).generate((1, 1))
        for i in range(grid.size):
            for coord in ((i, 0), (0, i), (i, grid.size - 1), (grid.size - 1, i)):
                assert grid.get(coord) == Cell.WALL

    def test_seeded_generation_is_reproducible(self):
        first = MazeGenerator(SeededRNG(7)).generate((1, 1))
        second = MazeGenerator(SeededRNG(7)).generate((1, 1))
        assert first == second

    def test_different_seeds_vary(self):
        grids = {tuple(MazeGenerator(SeededRNG(seed)).generate((1, 1)).to_rows()) for seed in range(10)}
        assert len(grids) > 1

    def test_extra_openings_keep_region_connected(self):
        for seed in range(20):
            rng = SeededRNG(seed)
            generator = MazeGenerator(rng)
            grid = MazeGrid(12)
            generator.carve_lattice(grid, (1, 1))
            openings = generator.add_extra_openings(grid)

            assert 2 <= len(openings) <= 4
            assert all(grid.is_interior(coord) for coord in openings)
            # Every path cell is still in the start's component
            assert len(reachable_region(grid, (1, 1))) == grid.path_count()

    def test_no_openings_without_candidates(self, rng):
        generator = MazeGenerator(rng)
        assert generator.add_extra_openings(MazeGrid(12)) == []


class StubGenerator(MazeGenerator):
    """Generator that carves only the start cell."""

    def generate(self, start=None):
        grid = MazeGrid(self.config.grid_size)
        grid.carve(start or self.config.start)
        return grid


class TestCarveDirectPath:
    @pytest.mark.parametrize("start,goal", [
        ((1, 1), (10, 10)),
        ((1, 1), (10, 1)),
        ((1, 1), (1, 10)),
        ((10, 10), (1, 1)),
        ((10, 1), (1, 6)),
        ((4, 4), (4, 4)),
    ])
    def test_connects_in_any_direction(self, start, goal):
        grid = MazeGrid(12)
        carved = carve_direct_path(grid, start, goal)
        assert carved[-1] == goal
        assert is_contiguous_path(carved, start, goal)
        assert is_reachable(grid, start, goal)

    def test_l_shape(self):
        grid = MazeGrid(6)
        carve_direct_path(grid, (1, 1), (4, 3))
        assert grid.to_rows() == [
            "######",
            "#....#",
            "####.#",
            "####.#",
            "######",
            "######",
        ]


class TestConnectivityGuarantor:
    def test_reachable_maze_not_repaired(self, rng):
        grid = MazeGrid.from_rows([
            "#######",
            "#.....#",
            "#######",
            "#######",
            "#######",
            "#######",
            "#######",
        ])
        guarantor = ConnectivityGuarantor(rng, NO_EXTRAS)
        report = guarantor.ensure(grid, (1, 1), (5, 1))
        assert report.initially_reachable
        assert report.repair == REPAIR_NONE
        assert grid.path_count() == 5

    def test_disconnected_maze_repaired_with_astar(self, rng):
        grid = MazeGrid(12)
        grid.carve((1, 1))
        report = ConnectivityGuarantor(rng).ensure(grid, (1, 1), (10, 10))

        assert not report.initially_reachable
        assert report.repair == REPAIR_ASTAR
        assert is_contiguous_path(report.carved_cells, (1, 1), (10, 10))
        assert not report.final_fallback
        assert is_reachable(grid, (1, 1), (10, 10))

    def test_empty_pathfinder_result_falls_back_to_direct_path(self, rng):
        grid = MazeGrid(12)
        guarantor = ConnectivityGuarantor(rng, NO_EXTRAS, path_finder=lambda s, g, grid: [])
        report = guarantor.ensure(grid, (1, 1), (6, 10))

        assert report.repair == REPAIR_DIRECT
        assert report.carved_cells[-1] == (6, 10)
        assert is_reachable(grid, (1, 1), (6, 10))

    def test_bad_repair_caught_by_final_check(self, rng):
        grid = MazeGrid(12)
        # A "route" that does not actually connect start and goal
        guarantor = ConnectivityGuarantor(rng, NO_EXTRAS, path_finder=lambda s, g, grid: [s, g])
        report = guarantor.ensure(grid, (1, 1), (10, 10))

        assert report.repair == REPAIR_ASTAR
        assert report.final_fallback
        assert is_reachable(grid, (1, 1), (10, 10))

    def test_extra_paths_are_anchored(self):
        for seed in range(20):
            grid = MazeGrid(12)
            grid.carve((1, 1))
            guarantor = ConnectivityGuarantor(SeededRNG(seed), GameConfig(extra_paths=(20, 20)))
            segments = guarantor.add_extra_paths(grid)
            for segment in segments:
                assert 1 <= len(segment) <= 3
                assert all(grid.is_interior(coord) for coord in segment)
            # Anchored segments grow the start's component; nothing floats
            assert len(reachable_region(grid, (1, 1))) == grid.path_count()

    def test_extra_path_count_within_range(self):
        grid = MazeGrid(12)
        for coord in grid.coords():
            if grid.is_interior(coord):
                grid.carve(coord)
        segments = ConnectivityGuarantor(SeededRNG(3)).add_extra_paths(grid)
        assert 4 <= len(segments) <= 11

    def test_scenario_stub_generator(self, config):
        rng = SeededRNG(99)
        grid = StubGenerator(rng, config).generate()
        assert not is_reachable(grid, (1, 1), (10, 10))

        report = ConnectivityGuarantor(rng, config).ensure(grid, (1, 1), (10, 10))
        assert report.repair == REPAIR_ASTAR
        assert is_reachable(grid, (1, 1), (10, 10))
