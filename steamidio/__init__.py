"""
steamidio
~~~~~~~~~

Parse, validate and convert Steam IDs between their 64-bit, ID32 and ID3 forms.

Licensed under The MIT License (MIT) - Copyright (c) 2020-present James H-B. See LICENSE
"""

from .__metadata__ import *
from .bits import *
from .enums import *
from .errors import *
from .id import *
from .profile import *

__import__("logging").getLogger(__name__).addHandler(__import__("logging").NullHandler())  # don't leak scope
