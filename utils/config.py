import os

from brownie import Wei, accounts, network, web3
from brownie.convert import to_address

DEVELOPMENT_NETWORKS = ['development', 'hardhat', 'anvil']


def get_is_live():
    active = network.show_active()
    return active not in DEVELOPMENT_NETWORKS and not active.endswith('-fork')


def get_env(name):
    if name not in os.environ:
        raise EnvironmentError(f'Please set the {name} environment variable')
    return os.environ[name]


def get_deployer_account():
    if not get_is_live():
        return accounts[0]

    if 'DEPLOYER' not in os.environ:
        raise EnvironmentError(
            'Please set DEPLOYER env variable to the deployer account name')

    return accounts.load(os.environ['DEPLOYER'])


def get_beneficiaries():
    if not get_is_live():
        return (accounts[1], accounts[2])

    return (get_env('BENEFICIARY_1'), get_env('BENEFICIARY_2'))


def get_tx_params(deployer):
    tx_params = {'from': deployer}
    if 'GAS_PRICE' in os.environ:
        tx_params['gas_price'] = os.environ['GAS_PRICE']
    return tx_params


def get_balance(account):
    # accepts both brownie accounts and plain addresses
    return Wei(web3.eth.get_balance(to_address(str(account))))
