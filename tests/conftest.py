import itertools

import pytest
from brownie import Wei

from scripts import deploy
from utils.diamond import get_selector


def fn(name, inputs=(), mutability='view', outputs=()):
    return {
        'type': 'function',
        'name': name,
        'inputs': [ {'name': '', 'type': t} if isinstance(t, str) else t for t in inputs ],
        'outputs': [ {'name': '', 'type': t} for t in outputs ],
        'stateMutability': mutability
    }


FACET_CUT_COMPONENTS = {
    'name': '_diamondCut',
    'type': 'tuple[]',
    'components': [
        {'name': 'facetAddress', 'type': 'address'},
        {'name': 'action', 'type': 'uint8'},
        {'name': 'functionSelectors', 'type': 'bytes4[]'}
    ]
}

ABIS = {
    'DiamondInit': [ fn('init', mutability='nonpayable') ],
    'DiamondCutFacet': [
        fn('diamondCut', [FACET_CUT_COMPONENTS, 'address', 'bytes'], 'nonpayable'),
        {'type': 'event', 'name': 'DiamondCut', 'inputs': [], 'anonymous': False}
    ],
    'DiamondLoupeFacet': [
        fn('facets'),
        fn('facetFunctionSelectors', ['address'], outputs=['bytes4[]']),
        fn('facetAddresses', outputs=['address[]']),
        fn('facetAddress', ['bytes4'], outputs=['address']),
        fn('supportsInterface', ['bytes4'], outputs=['bool'])
    ],
    'OwnershipFacet': [
        fn('owner', outputs=['address']),
        fn('transferOwnership', ['address'], 'nonpayable')
    ],
    'DistributorFacet': [
        fn('getBeneficiary1Stake', outputs=['uint256']),
        fn('getBeneficiary2Stake', outputs=['uint256']),
        fn('receiveAndDistributePayment', mutability='payable')
    ],
    'Diamond': [
        {'type': 'constructor', 'inputs': [], 'stateMutability': 'payable'},
        {'type': 'fallback', 'stateMutability': 'payable'}
    ]
}


class Ledger:
    """Deployed stand-in contracts and ether balances by address."""

    def __init__(self):
        self.addresses = (f'0x{i:040x}' for i in itertools.count(0x1000))
        self.contracts = {}
        self.balances = {}
        self.deployments = []

    def balance_of(self, account):
        return Wei(self.balances.get(str(account), 0))


class FakeEncoder:
    def __init__(self, signature):
        self.signature = signature

    def encode_input(self, *args):
        return get_selector(self.signature)


class FakeContract:
    def __init__(self, name, abi, address, args):
        self._name = name
        self.abi = abi
        self.address = address
        self.args = args

    def __getattr__(self, name):
        if name == 'init':
            return FakeEncoder('init()')
        raise AttributeError(name)


class FakeContainer:
    def __init__(self, name, ledger):
        self._name = name
        self.abi = ABIS[name]
        self.ledger = ledger

    def deploy(self, *args):
        (*args, tx_params) = args
        assert 'from' in tx_params
        contract = FakeContract(self._name, self.abi, next(self.ledger.addresses), args)
        self.ledger.contracts[contract.address] = contract
        self.ledger.deployments.append(self._name)
        return contract


class FakeDistributor:
    def __init__(self, diamond, ledger):
        self.args = diamond.args[1]
        self.ledger = ledger
        self.payments = []

    def getBeneficiary1Stake(self):
        return self.args.beneficiary_stake_1

    def getBeneficiary2Stake(self):
        return self.args.beneficiary_stake_2

    def receiveAndDistributePayment(self, tx_params):
        value = int(tx_params['value'])
        self.payments.append(tx_params)
        share_1 = value * self.args.beneficiary_stake_1 // 100
        balances = self.ledger.balances
        balances[self.args.beneficiary_1] = balances.get(self.args.beneficiary_1, 0) + share_1
        balances[self.args.beneficiary_2] = balances.get(self.args.beneficiary_2, 0) + value - share_1


class FakeContractFactory:
    def __init__(self, ledger):
        self.ledger = ledger
        self.distributors = []

    def from_abi(self, name, address, abi):
        assert name == 'DistributorFacet'
        assert abi == ABIS['DistributorFacet']
        distributor = FakeDistributor(self.ledger.contracts[address], self.ledger)
        self.distributors.append(distributor)
        return distributor


@pytest.fixture(scope='function')
def ledger():
    return Ledger()


@pytest.fixture(scope='function')
def containers(ledger):
    return { name: FakeContainer(name, ledger) for name in ABIS }


@pytest.fixture(scope='function')
def contract_factory(ledger, monkeypatch, containers):
    factory = FakeContractFactory(ledger)
    monkeypatch.setattr(deploy, '_console_containers', dict(containers))
    monkeypatch.setattr(deploy, 'Contract', factory)
    monkeypatch.setattr(deploy, 'get_balance', ledger.balance_of)
    return factory


@pytest.fixture(scope='function')
def owner():
    return '0x' + 'aa' * 20


@pytest.fixture(scope='function')
def beneficiaries():
    return ('0x' + 'b1' * 20, '0x' + 'b2' * 20)
