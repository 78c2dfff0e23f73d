"""Helpers for :mod:`paystack_gateway.miscellaneous`."""

from paystack_gateway.extension import extend
from paystack_gateway.mash import Mash
from paystack_gateway.miscellaneous import ListBanksResponse


class ListBanksResponseExtension:
    @property
    def bank_names(self) -> list[str]:
        return [bank.name for bank in self.data or []]

    @property
    def bank_slugs(self) -> list[str]:
        return [bank.slug for bank in self.data or []]

    def bank_details(self, *attributes: str) -> list[Mash]:
        """Each bank reduced to ``attributes``, e.g. ``bank_details("name", "code")``."""
        return [Mash({key: bank[key] for key in attributes if key in bank}) for bank in self.data or []]

    @property
    def by_bank_names(self) -> dict[str, Mash]:
        return {bank.name: bank for bank in self.data or []}

    @property
    def by_bank_codes(self) -> dict[str, Mash]:
        return {bank.code: bank for bank in self.data or []}


extend(ListBanksResponse, ListBanksResponseExtension)
