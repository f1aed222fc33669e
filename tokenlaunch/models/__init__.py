"""
Types here are instantiated as subclasses of pydantic's `BaseModel`.
This means we get runtime deserialization and validation for free just by using type declarations
and a couple of pydantic helpers.

Use these in your code as python objects, then serialize to json with `.model_dump()`
or the `to_json` helpers where the on-chain encoding differs from the python one
"""

from tokenlaunch.models.types import *
from tokenlaunch.models.Claim import *
from tokenlaunch.models.Transaction import *
from tokenlaunch.models.Deployment import *
from tokenlaunch.models.Settings import *
from tokenlaunch.models.Proposal import *
