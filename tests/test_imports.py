import importlib
import pytest

@pytest.mark.parametrize("module", [
    "gkmeans",
    "gkmeans.algorithms",
    "gkmeans.assignments",
    "gkmeans.representations",
    "gkmeans.updates",
    "gkmeans.distances",
    "gkmeans.initialization",
    "gkmeans.utils",
    "gkmeans.visualization",
])
def test_submodules_exist(module):
    mod = importlib.import_module(module)
    assert mod is not None


def test_public_api():
    import gkmeans

    for name in gkmeans.__all__:
        assert hasattr(gkmeans, name), name
