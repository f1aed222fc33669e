class EmptyClaimsError(Exception):
    """Raise if no claims are passed when building the merkle tree"""

    pass


class EmptyMerkleTreeError(Exception):
    """Raise if a merkle tree is built without leaves"""

    pass


class DuplicateClaimError(Exception):
    """Raise if an account has more than one claim of the same type"""

    pass


class MissingAccountColumnError(Exception):
    """Raise if a row of claims does not specify the account"""

    pass


class InvalidSaltError(Exception):
    """Raise if a deterministic deployment salt is not exactly 32 bytes"""

    pass


class ForwarderError(Exception):
    """Raise if a transaction cannot be wrapped by the forwarder"""

    pass


class BadConfigException(Exception):
    pass


class UnsupportedChainError(Exception):
    pass


class MissingDefaultTokenError(Exception):
    pass


class MissingArtifactError(Exception):
    pass


class CrossChainAddressMismatchError(Exception):
    """Raise if a contract would not land at the same address on both chains"""

    pass


class UnexpectedAddressError(Exception):
    """Raise if a computed address differs from the expected one in the settings"""

    pass


class MissingEnvironmentVariableException(Exception):
    pass


class UnsupportedBridgeTransactionError(Exception):
    """Raise if a transaction to relay through the message bridge is not a plain call"""

    pass


class AlreadyDeployedError(Exception):
    """Raise if a contract to deploy already has code at its address"""

    pass


class MissingDeployerError(Exception):
    """Raise if the deterministic deployment proxy is not available on the network"""

    pass
