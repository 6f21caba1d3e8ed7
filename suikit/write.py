"""Building and executing transactions on a node."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from suikit.rpc import BaseAPI, RpcError


def _options(options: Mapping[str, Any] | None) -> dict[str, Any]:
    return dict(options) if options is not None else {}


class WriteTransactionAPI(BaseAPI):
    """Executes signed transactions and asks the node to build unsigned ones.

    The builder methods return the node's transaction metadata, which holds
    the serialised transaction bytes ready to be signed.
    """

    def _fetch(self, method: str, params: list[Any]) -> Any:
        result = self._result(method, params)
        if result is None:
            raise RpcError(f"{method}: response carries no result")
        return result

    def execute_transaction_block(
        self,
        tx_bytes: str,
        signatures: Iterable[str],
        options: Mapping[str, Any] | None = None,
        request_type: str | None = None,
    ) -> dict[str, Any]:
        """Execute a transaction from its bytes and signatures."""
        return self._fetch(
            "sui_executeTransactionBlock",
            [tx_bytes, list(signatures), _options(options), request_type],
        )

    def move_call(
        self,
        signer: str,
        package_object_id: str,
        module: str,
        function: str,
        type_arguments: Iterable[Any],
        arguments: Iterable[Any],
        gas: str | None,
        gas_budget: str,
    ) -> dict[str, Any]:
        """Build a call of ``function`` in ``module`` of a package.

        The gas object is sent only when one is given; otherwise the node picks one.
        """
        params: list[Any] = [
            signer,
            package_object_id,
            module,
            function,
            list(type_arguments),
            list(arguments),
        ]
        if gas:
            params.append(gas)
        params.append(gas_budget)
        return self._fetch("unsafe_moveCall", params)

    def merge_coins(
        self,
        signer: str,
        primary_coin: str,
        coin_to_merge: str,
        gas: str | None,
        gas_budget: str,
    ) -> dict[str, Any]:
        """Build a merge of ``coin_to_merge`` into ``primary_coin``."""
        return self._fetch(
            "unsafe_mergeCoins", [signer, primary_coin, coin_to_merge, gas, gas_budget]
        )

    def split_coin(
        self,
        signer: str,
        coin_object_id: str,
        split_amounts: Iterable[str],
        gas: str | None,
        gas_budget: str,
    ) -> dict[str, Any]:
        """Build a split of one coin into coins of the given amounts."""
        return self._fetch(
            "unsafe_splitCoin",
            [signer, coin_object_id, list(split_amounts), gas, gas_budget],
        )

    def split_coin_equal(
        self,
        signer: str,
        coin_object_id: str,
        split_count: str,
        gas: str | None,
        gas_budget: str,
    ) -> dict[str, Any]:
        """Build a split of one coin into ``split_count`` equal coins."""
        return self._fetch(
            "unsafe_splitCoinEqual",
            [signer, coin_object_id, split_count, gas, gas_budget],
        )

    def publish(
        self,
        sender: str,
        compiled_modules: Iterable[str],
        dependencies: Iterable[str],
        gas: str | None,
        gas_budget: str,
    ) -> dict[str, Any]:
        """Build the publication of a Move package."""
        return self._fetch(
            "unsafe_publish",
            [sender, list(compiled_modules), list(dependencies), gas, gas_budget],
        )

    def transfer_object(
        self,
        signer: str,
        object_id: str,
        gas: str | None,
        gas_budget: str,
        recipient: str,
    ) -> dict[str, Any]:
        """Build a transfer of a publicly transferable object to ``recipient``."""
        return self._fetch(
            "unsafe_transferObject", [signer, object_id, gas, gas_budget, recipient]
        )

    def transfer_sui(
        self,
        signer: str,
        sui_object_id: str,
        gas_budget: str,
        recipient: str,
        amount: str,
    ) -> dict[str, Any]:
        """Build a transfer of SUI; the coin sent also pays for gas."""
        return self._fetch(
            "unsafe_transferSui", [signer, sui_object_id, gas_budget, recipient, amount]
        )

    def pay(
        self,
        signer: str,
        input_coins: Iterable[str],
        recipients: Iterable[str],
        amounts: Iterable[str],
        gas: str | None,
        gas_budget: str,
    ) -> dict[str, Any]:
        """Build a payment of any coin type to several recipients.

        The gas object may not be among ``input_coins``; without one the node picks one.
        """
        return self._fetch(
            "unsafe_pay",
            [signer, list(input_coins), list(recipients), list(amounts), gas, gas_budget],
        )

    def pay_sui(
        self,
        signer: str,
        input_coins: Iterable[str],
        recipients: Iterable[str],
        amounts: Iterable[str],
        gas_budget: str,
    ) -> dict[str, Any]:
        """Build a SUI payment to several recipients; the first input coin pays for gas."""
        return self._fetch(
            "unsafe_paySui",
            [signer, list(input_coins), list(recipients), list(amounts), gas_budget],
        )

    def pay_all_sui(
        self,
        signer: str,
        input_coins: Iterable[str],
        recipient: str,
        gas_budget: str,
    ) -> dict[str, Any]:
        """Build a transfer of all SUI in ``input_coins`` to one recipient."""
        return self._fetch(
            "unsafe_payAllSui", [signer, list(input_coins), recipient, gas_budget]
        )

    def request_add_stake(
        self,
        signer: str,
        coins: Iterable[str],
        amount: str | None,
        validator: str,
        gas: str | None,
        gas_budget: str,
    ) -> dict[str, Any]:
        """Build a stake of ``amount`` from ``coins`` with ``validator``."""
        return self._fetch(
            "unsafe_requestAddStake",
            [signer, list(coins), amount, validator, gas, gas_budget],
        )

    def request_withdraw_stake(
        self,
        signer: str,
        staked_object_id: str,
        gas: str | None,
        gas_budget: str,
    ) -> dict[str, Any]:
        """Build a withdrawal of a stake from its validator's pool."""
        return self._fetch(
            "unsafe_requestWithdrawStake", [signer, staked_object_id, gas, gas_budget]
        )

    def batch_transaction(
        self,
        signer: str,
        params: Iterable[Mapping[str, Any]],
        gas: str | None,
        gas_budget: str,
        builder_mode: str | None = None,
    ) -> dict[str, Any]:
        """Build one transaction out of several move-call and transfer requests."""
        return self._fetch(
            "unsafe_batchTransaction",
            [signer, [dict(item) for item in params], gas, gas_budget, builder_mode],
        )