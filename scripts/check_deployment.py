import os
from brownie import ZERO_ADDRESS, Contract

from scripts.deploy import get_contract_container
from utils.config import get_env
from utils.diamond import get_selectors

from diamond_config import (
    FACET_NAMES,
    BENEFICIARY_STAKE_1,
    BENEFICIARY_STAKE_2
)


def main():
    diamond_address = get_env('DIAMOND_ADDRESS')
    print(f'Using deployed diamond at address {diamond_address}')

    check_facets(diamond_address)

    if 'DIAMOND_OWNER' in os.environ:
        check_owner(diamond_address, os.environ['DIAMOND_OWNER'])

    check_stakes(diamond_address)

    print(f'All good!')


def at_diamond(name, diamond_address):
    return Contract.from_abi(name, diamond_address, get_contract_container(name).abi)


def check_facets(diamond_address, facet_names=FACET_NAMES):
    loupe = at_diamond('DiamondLoupeFacet', diamond_address)

    facet_addresses = loupe.facetAddresses()
    print(f'Facets registered: {len(facet_addresses)}')
    assert len(facet_addresses) == len(facet_names)

    for name in facet_names:
        selectors = get_selectors(get_contract_container(name))
        print(f'  {name}: {len(selectors)} functions')
        routed_to = { str(loupe.facetAddress(selector)) for selector in selectors }
        assert ZERO_ADDRESS not in routed_to, f'{name} has unrouted functions'
        assert len(routed_to) == 1, f'{name} functions are split across facets {routed_to}'

    print(f'[ok] All facet functions are routed')


def check_owner(diamond_address, expected_owner):
    ownership = at_diamond('OwnershipFacet', diamond_address)

    owner = ownership.owner()
    print(f'Owner: {owner}')
    assert str(owner).lower() == str(expected_owner).lower()

    print(f'[ok] Owner is correct')


def check_stakes(
    diamond_address,
    beneficiary_stake_1=BENEFICIARY_STAKE_1,
    beneficiary_stake_2=BENEFICIARY_STAKE_2
):
    distributor = at_diamond('DistributorFacet', diamond_address)

    print(f'Beneficiary 1 stake: {beneficiary_stake_1}%')
    assert distributor.getBeneficiary1Stake() == beneficiary_stake_1

    print(f'Beneficiary 2 stake: {beneficiary_stake_2}%')
    assert distributor.getBeneficiary2Stake() == beneficiary_stake_2

    print(f'[ok] Stakes are correct')
