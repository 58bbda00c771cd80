"""
网络模型
========

- region: 蓄水区域
- canal: 有向输水渠道
- topology: 拓扑解析与路线表
"""

from .region import Region, RegionState, RegionStatus
from .canal import Canal, CanalState
from .topology import (
    TransferRoute,
    NetworkTopology,
    find_region,
    match_canals,
    resolve_topology,
    resolve_legacy_topology,
    topology_from_canals,
    validate_canal_names
)

__all__ = [
    'Region',
    'RegionState',
    'RegionStatus',
    'Canal',
    'CanalState',
    'TransferRoute',
    'NetworkTopology',
    'find_region',
    'match_canals',
    'resolve_topology',
    'resolve_legacy_topology',
    'topology_from_canals',
    'validate_canal_names'
]
