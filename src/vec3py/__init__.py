import os

from vec3py.logging import (Vec3Error, Vec3ValueError, config_logging,
                            set_up_simple_logging)
from vec3py.misc import Scalar, vec3


def read(fil):
    fil = os.path.join(os.path.dirname(__file__), fil)
    with open(fil, encoding="utf-8") as f:
        return f.read()


__version__ = read("version.txt")
