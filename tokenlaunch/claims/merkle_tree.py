from eth_utils import keccak, to_hex

from tokenlaunch.errors import EmptyMerkleTreeError


class MerkleTree:
    """
    Binary merkle tree over 32 byte leaves.

    Each layer is built by hashing adjacent pairs of the previous layer from left to
    right. If a layer has an odd number of elements, the last one is carried to the
    next layer unchanged. The two children of a node are sorted before hashing, so a
    proof is just the list of siblings and a verifier does not need to know whether
    a sibling was on the left or on the right.
    """

    def __init__(self, leaves: list[bytes]):
        if len(leaves) == 0:
            raise EmptyMerkleTreeError("A merkle tree needs at least one leaf")
        for leaf in leaves:
            if len(leaf) != 32:
                raise ValueError(f"Merkle leaves must be 32 bytes, got {leaf.hex()}")
        self.layers: list[list[bytes]] = self._build_layers(list(leaves))

    @staticmethod
    def combined_hash(first: bytes, second: bytes) -> bytes:
        # raw byte order, the same order the on chain verifier uses on bytes32
        if first <= second:
            return keccak(first + second)
        return keccak(second + first)

    @classmethod
    def _next_layer(cls, elements: list[bytes]) -> list[bytes]:
        layer = []
        for i in range(0, len(elements), 2):
            if i + 1 == len(elements):
                layer.append(elements[i])
            else:
                layer.append(cls.combined_hash(elements[i], elements[i + 1]))
        return layer

    @classmethod
    def _build_layers(cls, leaves: list[bytes]) -> list[list[bytes]]:
        layers = [leaves]
        while len(layers[-1]) > 1:
            layers.append(cls._next_layer(layers[-1]))
        return layers

    @property
    def leaves(self) -> list[bytes]:
        return self.layers[0]

    @property
    def root(self) -> bytes:
        return self.layers[-1][0]

    @property
    def hex_root(self) -> str:
        return to_hex(self.root)

    def proof(self, index: int) -> list[bytes]:
        """Siblings of the nodes on the path from leaf `index` to the root"""
        if index < 0 or index >= len(self.leaves):
            raise IndexError(f"Leaf {index} out of range for {len(self.leaves)} leaves")
        proof = []
        for layer in self.layers[:-1]:
            sibling = index ^ 1
            # no sibling if the node is carried to the next layer
            if sibling < len(layer):
                proof.append(layer[sibling])
            index //= 2
        return proof

    def hex_proof(self, index: int) -> list[str]:
        return [to_hex(p) for p in self.proof(index)]

    @classmethod
    def verify(cls, leaf: bytes, proof: list[bytes], root: bytes) -> bool:
        node = leaf
        for sibling in proof:
            node = cls.combined_hash(node, sibling)
        return node == root
