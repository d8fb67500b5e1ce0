import typing as _tp

import pydantic as _pyd
import zcashrpc.zcash.amount as _zza


class ResponseSchema(_pyd.BaseModel):
    model_config = _pyd.ConfigDict(frozen=True, extra="forbid")


class GetInfoResponse(ResponseSchema):
    balance: _zza.ZecAmount
    blocks: _pyd.NonNegativeInt
    connections: _pyd.NonNegativeInt
    difficulty: float
    errors: str
    keypoololdest: _pyd.NonNegativeInt
    keypoolsize: _pyd.NonNegativeInt
    paytxfee: _zza.ZecAmount
    protocolversion: _pyd.NonNegativeInt
    proxy: str
    relayfee: _zza.ZecAmount
    testnet: bool
    timeoffset: int
    version: _pyd.NonNegativeInt
    walletversion: _pyd.NonNegativeInt


class ValuePool(ResponseSchema):
    id: str
    monitored: bool
    chain_value: _zza.ZecAmount | None = _pyd.Field(None, alias="chainValue")
    chain_value_zat: _pyd.NonNegativeInt | None = _pyd.Field(
        None, alias="chainValueZat"
    )
    value_delta: _zza.ZecAmount | None = _pyd.Field(None, alias="valueDelta")
    value_delta_zat: int | None = _pyd.Field(None, alias="valueDeltaZat")


class SoftforkMajorityDesc(ResponseSchema):
    status: bool
    found: int
    required: int
    # TODO: give `window` a concrete type once its shape is pinned down across
    # daemon versions; until then it is passed through as opaque JSON.
    window: _tp.Any


class Softfork(ResponseSchema):
    id: str
    version: int
    enforce: SoftforkMajorityDesc
    reject: SoftforkMajorityDesc


class NetworkUpgradeDesc(ResponseSchema):
    name: str
    activationheight: _pyd.NonNegativeInt
    status: str
    info: str


class Consensus(ResponseSchema):
    chaintip: str
    nextblock: str


class GetBlockChainInfoResponse(ResponseSchema):
    chain: str
    blocks: _pyd.NonNegativeInt
    headers: _pyd.NonNegativeInt
    bestblockhash: str
    difficulty: float
    verificationprogress: float
    chainwork: str
    pruned: bool
    size_on_disk: _pyd.NonNegativeInt
    commitments: _pyd.NonNegativeInt
    value_pools: list[ValuePool] = _pyd.Field(alias="valuePools")
    softforks: list[Softfork]
    upgrades: dict[str, NetworkUpgradeDesc]
    consensus: Consensus
    pruneheight: _pyd.NonNegativeInt | None = None
    fully_notified: bool | None = _pyd.Field(None, alias="fullyNotified")
