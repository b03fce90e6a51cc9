from typing import NamedTuple

from brownie import Wei

FACET_NAMES = [
    'DiamondCutFacet',
    'DiamondLoupeFacet',
    'OwnershipFacet',
    'DistributorFacet',
]

INIT_FUNCTION = 'init'

STAKE_TOTAL = 100

BENEFICIARY_STAKE_1 = 70
BENEFICIARY_STAKE_2 = 30

# sent through receiveAndDistributePayment right after the deploy
DISTRIBUTION_CHECK_PAYMENT = Wei('10 ether')


class DiamondArgs(NamedTuple):
    """Arguments struct of the Diamond constructor, in field order."""
    owner: str
    init: str
    init_calldata: str
    beneficiary_1: str
    beneficiary_2: str
    beneficiary_stake_1: int
    beneficiary_stake_2: int


assert BENEFICIARY_STAKE_1 + BENEFICIARY_STAKE_2 == STAKE_TOTAL, \
    f'invalid stakes sum: expected {STAKE_TOTAL}, actual {BENEFICIARY_STAKE_1 + BENEFICIARY_STAKE_2}'
