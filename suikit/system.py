"""Checkpoint, epoch, staking, validator and protocol queries."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from suikit.rpc import BaseAPI, RpcError
from suikit.utils import is_field_non_empty
from suikit.validate import validate_range

_UINT64_MAX = 2**64 - 1


def _parse_uint(method: str, value: Any) -> int:
    if isinstance(value, bool):
        raise RpcError(f"{method}: result {value!r} is not an unsigned integer")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        number = int(value)
    else:
        raise RpcError(f"{method}: result {value!r} is not an unsigned integer")
    if not 0 <= number <= _UINT64_MAX:
        raise RpcError(f"{method}: result {value!r} is out of range")
    return number


class SystemAPI(BaseAPI):
    """Reads chain-wide state: checkpoints, epochs, stakes and configuration."""

    def _fetch(self, method: str, params: list[Any]) -> Any:
        result = self._result(method, params)
        if result is None:
            raise RpcError(f"{method}: response carries no result")
        return result

    def _fetch_uint(self, method: str) -> int:
        return _parse_uint(method, self._fetch(method, []))

    def get_checkpoint(self, checkpoint_id: str) -> dict[str, Any]:
        """The checkpoint with ``checkpoint_id`` (sequence number or digest)."""
        return self._fetch("sui_getCheckpoint", [checkpoint_id])

    def get_checkpoints(
        self, cursor: Any = None, limit: int | None = None, descending_order: bool = False
    ) -> dict[str, Any]:
        """One page of checkpoints."""
        validate_range("Limit", limit, lower=0)
        return self._fetch("sui_getCheckpoints", [cursor, limit, descending_order])

    def get_latest_checkpoint_sequence_number(self) -> int:
        """Sequence number of the latest executed checkpoint."""
        return self._fetch_uint("sui_getLatestCheckpointSequenceNumber")

    def get_reference_gas_price(self) -> int:
        """Reference gas price of the network."""
        return self._fetch_uint("suix_getReferenceGasPrice")

    def get_committee_info(self, epoch: Any = None) -> dict[str, Any]:
        """Committee information for ``epoch``."""
        return self._fetch("suix_getCommitteeInfo", [epoch])

    def get_stakes(self, owner: str) -> list[dict[str, Any]]:
        """Delegated stakes of ``owner``."""
        return self._fetch("suix_getStakes", [owner])

    def get_stakes_by_ids(self, staked_sui_ids: Iterable[str]) -> list[dict[str, Any]]:
        """Delegated stakes by staked object id; withdrawn stakes report Unstaked."""
        return self._fetch("suix_getStakesByIds", [list(staked_sui_ids)])

    def get_epochs(
        self, cursor: Any = None, limit: int | None = None, descending_order: bool = False
    ) -> dict[str, Any]:
        """One page of epoch information."""
        return self._fetch("suix_getEpochs", [cursor, limit, descending_order])

    def get_current_epoch(self) -> dict[str, Any]:
        """Information on the current epoch."""
        return self._fetch("suix_getCurrentEpoch", [])

    def get_latest_sui_system_state(self) -> dict[str, Any]:
        """The latest system state object on chain."""
        return self._fetch("suix_getLatestSuiSystemState", [])

    def get_chain_identifier(self) -> str:
        """The chain identifier, or an empty string when none is reported."""
        result = self._result("sui_getChainIdentifier", [])
        if result is None:
            return ""
        if isinstance(result, str):
            return result
        return json.dumps(result, separators=(",", ":"))

    def get_validators_apy(self) -> dict[str, Any]:
        """Annual percentage yield of each validator."""
        return self._fetch("suix_getValidatorsApy", [])

    def get_protocol_config(self, version: Any = None) -> dict[str, Any]:
        """Protocol configuration for ``version``, or for the latest epoch if not given."""
        params = [version] if is_field_non_empty({"Version": version}, "Version") else []
        return self._fetch("sui_getProtocolConfig", params)