from tokenlaunch.deploy import transfer
from tokenlaunch.models import MakeSwappableProposal, MakeSwappableSettings, MetaTransaction


def make_virtual_token_swappable(settings: MakeSwappableSettings) -> MetaTransaction:
    """
    Funds the virtual token with real tokens. Virtual tokens can be swapped for
    real ones as long as the virtual token contract holds enough of them.
    """
    return transfer(settings.cowToken, settings.virtualCowToken, settings.atomsToTransfer)


def generate_make_swappable_proposal(settings: MakeSwappableSettings) -> MakeSwappableProposal:
    return MakeSwappableProposal(steps=[[make_virtual_token_swappable(settings)]])
