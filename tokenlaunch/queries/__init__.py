from tokenlaunch.queries.common import *
