from .scalar import Scalar
from .vec3 import vec3
