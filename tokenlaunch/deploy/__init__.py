from tokenlaunch.deploy.abi import *
from tokenlaunch.deploy.create2 import *
from tokenlaunch.deploy.safe import *
from tokenlaunch.deploy.contracts import *
from tokenlaunch.deploy.forwarder import *
from tokenlaunch.deploy.bridge import *
