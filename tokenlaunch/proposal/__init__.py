from tokenlaunch.proposal.deployment import *
from tokenlaunch.proposal.make_swappable import *
from tokenlaunch.proposal.snapshot import *
from tokenlaunch.proposal.bridged_token_deployer import *
