import pytest

def pytest_addoption(parser):
    group = parser.getgroup("docdelta")
    group.addoption("--quick", action="store_true", default=False,
                    help="skip the randomized round-trip tests")
    group.addoption("--slow", action="store_true", default=False,
                    help="only run the randomized round-trip tests")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--slow"):
        return
    only_slow = pytest.mark.skip(reason="--slow given, running randomized tests only")
    for item in items:
        if 'slow' not in getattr(item, 'fixturenames', ()):
            item.add_marker(only_slow)
