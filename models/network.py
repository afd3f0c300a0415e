from dataclasses import dataclass


@dataclass(frozen=True)
class Network:
    name: str
    rpc_url: str
    chain_id: int
    explorer: str
    native_token: str
