"""Shared fixtures: small scenes and cameras."""

from __future__ import annotations
import pytest

from view2camera import Camera, Model, Position, Vertex, PipelineLogger


class RecordingLogger(PipelineLogger):
    """Keeps every line it receives."""
    
    def __init__(self):
        self.lines = []
    
    def message(self, text: str) -> None:
        self.lines.append(text)


@pytest.fixture
def recorder():
    return RecordingLogger()


@pytest.fixture
def identity_camera():
    return Camera.perspective_camera(-1.0, 1.0, -1.0, 1.0)


@pytest.fixture
def skew_camera():
    return Camera.perspective_camera(0.0, 2.0, 0.0, 2.0)


def make_model(name, vertices, nested=(), visible=True):
    return Model(
        vertex_list=[Vertex(*v) for v in vertices],
        primitive_list=[("line", 0, i) for i in range(1, len(vertices))],
        color_list=[(1.0, 0.0, 0.0)] * len(vertices),
        nested_models=nested,
        name=name,
        visible=visible,
    )


@pytest.fixture
def model_tree():
    """
    body
    ├── arm (hidden)
    │   └── hand
    └── head
    """
    hand = make_model("hand", [(1.0, 1.0, -1.0)])
    arm = make_model("arm", [(1.0, 0.0, -2.0), (0.0, 1.0, -2.0)], nested=[hand], visible=False)
    head = make_model("head", [(0.5, 0.5, -1.0)])
    return make_model("body", [(1.0, 1.0, -1.0), (2.0, 2.0, -2.0), (0.0, 0.0, -3.0)], nested=[arm, head])


@pytest.fixture
def scene(model_tree):
    """
    root (body)
    ├── hidden (ghost, invisible)
    │   └── child (cube)
    └── leaf (empty)
    """
    ghost = make_model("ghost", [(1.0, 1.0, -1.0)], visible=False)
    cube = make_model("cube", [(1.0, 1.0, -1.0), (0.0, 2.0, -2.0)])
    empty = make_model("empty", [])
    
    hidden = Position(model=ghost, name="hidden", nested_positions=[Position(cube, "child")])
    leaf = Position(model=empty, name="leaf")
    return Position(model=model_tree, name="root", nested_positions=[hidden, leaf])
