"""
Helpers for building EIP-2535 diamond cuts out of brownie contracts.

A diamond routes every call by its 4-byte function selector, so registering a
facet means listing the selectors of the functions it should serve.
"""
from enum import IntEnum
from typing import NamedTuple

from brownie import ZERO_ADDRESS
from brownie.convert.utils import build_function_signature
from eth_utils import encode_hex, function_signature_to_4byte_selector

INIT_SIGNATURE = 'init(bytes)'


class FacetCutAction(IntEnum):
    Add = 0
    Replace = 1
    Remove = 2


class FacetCut(NamedTuple):
    facet_address: str
    action: FacetCutAction
    function_selectors: list


def get_selector(signature):
    return encode_hex(function_signature_to_4byte_selector(signature))


class Selectors(list):
    """
    Function selectors of a contract, in ABI order.

    Keeps the function names and signatures next to the selectors so a subset
    can be picked either by plain name (`'owner'`) or by full signature
    (`'transferOwnership(address)'`).
    """

    def __init__(self, selectors, contract=None, signatures=None):
        super().__init__(selectors)
        self.contract = contract
        self.signatures = signatures if signatures is not None else {}

    def _matches(self, selector, names):
        signature = self.signatures.get(selector, '')
        return signature in names or signature.split('(')[0] in names

    def exclude(self, names):
        return Selectors(
            [s for s in self if not self._matches(s, names)],
            self.contract,
            self.signatures
        )

    def include(self, names):
        return Selectors(
            [s for s in self if self._matches(s, names)],
            self.contract,
            self.signatures
        )


def get_selectors(contract):
    signatures = {}
    for abi in contract.abi:
        if abi['type'] != 'function':
            continue
        signature = build_function_signature(abi)
        if signature == INIT_SIGNATURE:
            continue
        signatures[get_selector(signature)] = signature
    return Selectors(list(signatures), contract, signatures)


def remove_selectors(selectors, signatures):
    removed = {get_selector(s) for s in signatures}
    return [s for s in selectors if s not in removed]


def find_address_position_in_facets(facet_address, facets):
    for i, (address, _) in enumerate(facets):
        if str(address).lower() == str(facet_address).lower():
            return i
    return None


def facet_cut(contract, action=FacetCutAction.Add):
    if action == FacetCutAction.Remove:
        # the diamond requires a zero facet address for removals
        return FacetCut(ZERO_ADDRESS, action, get_selectors(contract))
    return FacetCut(contract.address, action, get_selectors(contract))
