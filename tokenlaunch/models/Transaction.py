from __future__ import annotations

from enum import IntEnum
from typing import TypedDict

import eth_utils as eth
from pydantic import BaseModel, ConfigDict, field_validator

from tokenlaunch.models.types import BigNumber, EthereumAddress, HexStr


class SafeOperation(IntEnum):
    CALL = 0
    DELEGATE_CALL = 1


class JsonMetaTransaction(TypedDict):
    to: EthereumAddress
    value: BigNumber
    data: HexStr
    operation: int


class MetaTransaction(BaseModel):
    """
    A single transaction executed by a Safe, the atomic unit of every proposal.
    :param `to`: target of the call, checksummed on read
    :param `value`: native token sent with the call, in wei
    :param `data`: calldata as 0x-prefixed hex
    :param `operation`: call or delegatecall
    """

    model_config = ConfigDict(frozen=True)

    to: EthereumAddress
    value: int = 0
    data: HexStr = "0x"
    operation: SafeOperation = SafeOperation.CALL

    @field_validator("to")
    @classmethod
    def checksum_to(cls, to: str) -> str:
        return eth.to_checksum_address(to)

    @field_validator("value")
    @classmethod
    def check_value(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Transaction value cannot be negative")
        return value

    @field_validator("data")
    @classmethod
    def check_data(cls, data: str) -> str:
        if data in ("", "0x"):
            return "0x"
        if not eth.is_hex(data) or len(eth.remove_0x_prefix(data)) % 2 != 0:
            raise ValueError(f"Invalid transaction data {data}")
        return eth.add_0x_prefix(data.lower())

    @property
    def data_bytes(self) -> bytes:
        return eth.to_bytes(hexstr=self.data)

    def to_json(self) -> JsonMetaTransaction:
        return {
            "to": self.to,
            "value": str(self.value),
            "data": self.data,
            "operation": int(self.operation),
        }
