"""Tests for the placeholder sprite generator."""

import pygame

import make_assets
from arcade_rt.assets import ImageLoader
from games.FruitCatch.fruit import FruitKind


class TestGenerate:

    def test_writes_every_sprite(self, tmp_path):
        written = make_assets.generate(tmp_path)
        names = {path.stem for path in written}
        assert names == {kind.value for kind in FruitKind} | {'basket'}

    def test_sprites_load_with_expected_sizes(self, tmp_path):
        make_assets.generate(tmp_path)
        loader = ImageLoader(tmp_path)
        assert loader.load('basket').get_size() == make_assets.BASKET_SIZE
        for kind in FruitKind:
            size = make_assets.FRUIT_SIZE
            assert loader.load(kind.value).get_size() == (size, size)

    def test_existing_files_are_kept(self, tmp_path):
        make_assets.generate(tmp_path)
        apple = tmp_path / 'images' / 'apple.png'
        pygame.image.save(pygame.Surface((5, 5)), str(apple))

        assert make_assets.generate(tmp_path) == []
        assert pygame.image.load(str(apple)).get_size() == (5, 5)

        assert len(make_assets.generate(tmp_path, force=True)) == len(make_assets.SPRITES)
        assert pygame.image.load(str(apple)).get_size() == (48, 48)
