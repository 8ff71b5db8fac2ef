import sys
import os

import pytest

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from pixelcolor.colors import RGB_CLASSES



@pytest.fixture(params=RGB_CLASSES, ids=lambda cls: cls.__name__)
def rgb_class(request):
    return request.param
