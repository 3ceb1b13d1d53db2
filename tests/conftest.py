"""Shared pytest fixtures for formation editor tests."""

import pytest
from pygame import Rect

from choreo.controllers.drag_controller import DragController
from choreo.controllers.view_state import CoordinateMapper, ViewportTransform
from choreo.core.config import StageConfig
from choreo.data.formation import Dancer, Formation


class TransformHolder:
    """Stand-in transform provider whose transform tests can swap."""

    def __init__(self, transform):
        self.transform = transform

    def __call__(self):
        return self.transform


@pytest.fixture
def stage_config():
    """Default 1000x600 stage."""
    return StageConfig()


@pytest.fixture
def formation(stage_config):
    """The starting five-dancer formation."""
    return Formation.default(stage_config)


@pytest.fixture
def single_dancer_formation():
    """Stage with only d1 at (250, 220), radius 22."""
    formation = Formation(1000, 600)
    formation.add(Dancer("d1", 250, 220, 22, name="1"))
    return formation


@pytest.fixture
def letterbox_transform():
    """Stage letterboxed into a 500x400 canvas at (20, 60): scale 0.5, bars top and bottom."""
    return ViewportTransform.fit(Rect(20, 60, 500, 400), 1000, 600)


@pytest.fixture
def transform_holder(letterbox_transform):
    return TransformHolder(letterbox_transform)


@pytest.fixture
def controller(single_dancer_formation, transform_holder):
    """Drag controller over single_dancer_formation using the letterbox transform."""
    return DragController(single_dancer_formation, transform_holder)


@pytest.fixture
def device_at(transform_holder):
    """Convert a stage point to the device point that maps onto it."""

    def _device_at(x, y):
        return CoordinateMapper.to_device((x, y), transform_holder.transform)

    return _device_at
