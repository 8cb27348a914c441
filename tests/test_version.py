import os
import sys

sys.path.insert(1, os.path.join(sys.path[0], ".."))

import quiver


def test_version():
    assert hasattr(quiver, "__version__")
    print("__version__", quiver.__version__)
    assert hasattr(quiver, "__build__")
    print("__build__", quiver.__build__)
    assert hasattr(quiver, "__author__")
    print("__author__", quiver.__author__)


if __name__ == "__main__":  # pragma: no cover
    test_version()

    print("okay")
