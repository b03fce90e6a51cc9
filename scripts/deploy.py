import brownie
from brownie import Contract

from utils.diamond import FacetCutAction, facet_cut
from utils.config import (
    get_balance,
    get_beneficiaries,
    get_deployer_account,
    get_tx_params
)

from diamond_config import (
    FACET_NAMES,
    INIT_FUNCTION,
    STAKE_TOTAL,
    BENEFICIARY_STAKE_1,
    BENEFICIARY_STAKE_2,
    DISTRIBUTION_CHECK_PAYMENT,
    DiamondArgs
)

_console_containers = {}


def set_console_globals(**kwargs):
    """
    Inside Brownie console the project containers can't be imported from
    `brownie`, pass them here instead, e.g. `set_console_globals(Diamond=Diamond)`.
    """
    _console_containers.update(kwargs)


def get_contract_container(name):
    if name in _console_containers:
        return _console_containers[name]
    container = getattr(brownie, name, None)
    if container is None:
        raise LookupError(f'Contract {name} is not part of the loaded brownie project')
    return container


def encode_init_calldata(diamond_init):
    return getattr(diamond_init, INIT_FUNCTION).encode_input()


def deploy_facets(tx_params, facet_names=FACET_NAMES):
    containers = [ get_contract_container(name) for name in facet_names ]

    facets = []
    facet_cuts = []
    for (name, container) in zip(facet_names, containers):
        facet = container.deploy(tx_params)
        print(f'{name} deployed: {facet.address}')
        facets.append(facet)
        facet_cuts.append(facet_cut(facet, FacetCutAction.Add))

    return (facets, facet_cuts)


def deploy_diamond(
    tx_params,
    owner,
    beneficiary_1,
    beneficiary_2,
    beneficiary_stake_1=BENEFICIARY_STAKE_1,
    beneficiary_stake_2=BENEFICIARY_STAKE_2,
    facet_names=FACET_NAMES,
    check_payment=DISTRIBUTION_CHECK_PAYMENT
):
    if beneficiary_stake_1 + beneficiary_stake_2 != STAKE_TOTAL:
        raise ValueError(
            f'invalid stakes sum: expected {STAKE_TOTAL}, '
            f'actual {beneficiary_stake_1 + beneficiary_stake_2}'
        )

    # resolve everything up front so a missing contract fails before any deploy
    DiamondInit = get_contract_container('DiamondInit')
    Diamond = get_contract_container('Diamond')
    DistributorFacet = get_contract_container('DistributorFacet')
    for name in facet_names:
        get_contract_container(name)

    # DiamondInit.init is delegatecalled by the diamond during the cut
    diamond_init = DiamondInit.deploy(tx_params)
    print(f'DiamondInit deployed: {diamond_init.address}')

    print()
    print('Deploying facets')
    (_, facet_cuts) = deploy_facets(tx_params, facet_names)

    diamond_args = DiamondArgs(
        owner=str(owner),
        init=diamond_init.address,
        init_calldata=encode_init_calldata(diamond_init),
        beneficiary_1=str(beneficiary_1),
        beneficiary_2=str(beneficiary_2),
        beneficiary_stake_1=beneficiary_stake_1,
        beneficiary_stake_2=beneficiary_stake_2
    )

    diamond = Diamond.deploy(facet_cuts, diamond_args, tx_params)
    print()
    print(f'Diamond deployed: {diamond.address}')

    distributor = Contract.from_abi('DistributorFacet', diamond.address, DistributorFacet.abi)

    print(f'Stake1 is {distributor.getBeneficiary1Stake()}')
    print(f'Stake2 is {distributor.getBeneficiary2Stake()}')

    distributor.receiveAndDistributePayment({**tx_params, 'value': check_payment})

    print(f'Partner1 final balance is {get_balance(beneficiary_1).to("ether")}')
    print(f'Partner2 final balance is {get_balance(beneficiary_2).to("ether")}')

    return diamond


def main():
    owner = get_deployer_account()
    (beneficiary_1, beneficiary_2) = get_beneficiaries()

    return deploy_diamond(
        tx_params=get_tx_params(owner),
        owner=owner,
        beneficiary_1=beneficiary_1,
        beneficiary_2=beneficiary_2
    )
