"""
Claims are committed to with a single merkle root: the leaves are the hashes of
the claims sorted by account, every user gets the proof of their own claims.
"""
from tokenlaunch.claims.hashing import *
from tokenlaunch.claims.merkle_tree import *
from tokenlaunch.claims.proofs import *
from tokenlaunch.claims.split import *
from tokenlaunch.claims.parse import *
from tokenlaunch.claims.execute import *
