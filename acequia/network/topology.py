"""
网络拓扑解析
============

把区域/渠道集合解析为按优先级排列的输水路线表:
- 按配置的名称约定定位区域与渠道
- 兼容旧场景的"名称包含字母"匹配 (先匹配者优先)
- 按渠道自身端点构造任意有向图

解析失败的引用为 None，下游调度函数把 None 视为空操作。
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..config.settings import TopologyConfig, MatchMode
from ..core.base_config import ValidationResult, ValidationSeverity
from .region import Region
from .canal import Canal


@dataclass
class TransferRoute:
    """输水路线 (供水区域, 受水区域, 渠道)"""
    source: Optional[Region]
    destination: Optional[Region]
    canal: Optional[Canal]

    @property
    def is_resolved(self) -> bool:
        return self.source is not None and self.destination is not None and self.canal is not None

    @property
    def label(self) -> str:
        src = self.source.name if self.source else "?"
        dst = self.destination.name if self.destination else "?"
        canal = self.canal.name if self.canal else "?"
        return f"{src}->{dst} via {canal}"


@dataclass
class NetworkTopology:
    """已解析的网络拓扑"""
    regions: Dict[str, Optional[Region]] = field(default_factory=dict)
    canals: Dict[str, Optional[Canal]] = field(default_factory=dict)
    routes: List[TransferRoute] = field(default_factory=list)

    def region(self, role: str) -> Optional[Region]:
        return self.regions.get(role)

    def canal(self, role: str) -> Optional[Canal]:
        return self.canals.get(role)

    def unresolved(self) -> List[str]:
        """未能解析的角色"""
        missing = [role for role, r in self.regions.items() if r is None]
        missing += [role for role, c in self.canals.items() if c is None]
        return missing


def find_region(regions: Sequence[Region], name: str) -> Optional[Region]:
    """按名称精确查找区域"""
    found = None
    for r in regions:
        if r.name == name:
            found = r
    return found


def _canal_role(canal_name: str, markers: Dict[str, str],
                mode: MatchMode) -> Optional[str]:
    for role, marker in markers.items():
        if mode == MatchMode.EXACT:
            if canal_name == marker:
                return role
        elif marker in canal_name:
            return role
    return None


def match_canals(canals: Sequence[Canal], markers: Dict[str, str],
                 mode: MatchMode = MatchMode.SUBSTRING) -> Dict[str, Optional[Canal]]:
    """
    为每个渠道角色匹配渠道

    逐个渠道检查标识，按 markers 顺序取第一个命中的角色；
    多个渠道命中同一角色时后出现者覆盖前者。

    Parameters:
        canals: 渠道列表
        markers: 渠道角色 -> 标识
        mode: 匹配方式

    Returns:
        渠道角色 -> 渠道 (未命中为 None)
    """
    matched: Dict[str, Optional[Canal]] = {role: None for role in markers}
    for c in canals:
        role = _canal_role(c.name, markers, mode)
        if role is not None:
            matched[role] = c
    return matched


def resolve_topology(regions: Sequence[Region], canals: Sequence[Canal],
                     config: Optional[TopologyConfig] = None) -> NetworkTopology:
    """
    按拓扑配置解析网络

    Parameters:
        regions: 区域列表
        canals: 渠道列表
        config: 拓扑配置 (None=默认三角网络)

    Returns:
        NetworkTopology: 路线按配置中的优先级排列
    """
    config = config or TopologyConfig()

    region_map = {
        role: find_region(regions, name)
        for role, name in config.region_names.items()
    }
    canal_map = match_canals(canals, config.canal_markers, config.match_mode)

    routes = [
        TransferRoute(
            source=region_map.get(spec.source),
            destination=region_map.get(spec.destination),
            canal=canal_map.get(spec.canal)
        )
        for spec in config.routes
    ]

    return NetworkTopology(regions=region_map, canals=canal_map, routes=routes)


def resolve_legacy_topology(regions: Sequence[Region],
                            canals: Sequence[Canal]) -> NetworkTopology:
    """按北-南-东三角网络的名称约定解析"""
    return resolve_topology(regions, canals, TopologyConfig())


def topology_from_canals(regions: Sequence[Region],
                         canals: Sequence[Canal]) -> NetworkTopology:
    """
    按渠道自身端点构造拓扑

    适用于任意有向图；路线优先级即渠道列表顺序。
    """
    region_map = {r.name: r for r in regions}
    canal_map: Dict[str, Optional[Canal]] = {}
    routes = []
    for c in canals:
        canal_map[c.name] = c
        routes.append(TransferRoute(
            source=region_map.get(c.source),
            destination=region_map.get(c.destination),
            canal=c
        ))
    return NetworkTopology(regions=dict(region_map), canals=canal_map, routes=routes)


def validate_canal_names(canals: Sequence[Canal],
                         config: Optional[TopologyConfig] = None) -> List[ValidationResult]:
    """
    检查渠道命名是否存在歧义

    - 名称同时包含多个标识 (按先匹配者处理)
    - 多个渠道命中同一角色 (后者覆盖前者)
    - 角色未命中任何渠道
    """
    config = config or TopologyConfig()
    results = []

    if config.match_mode == MatchMode.SUBSTRING:
        for c in canals:
            hits = [role for role, marker in config.canal_markers.items() if marker in c.name]
            if len(hits) > 1:
                results.append(ValidationResult(
                    is_valid=False,
                    severity=ValidationSeverity.WARNING,
                    message=f"渠道名称 {c.name!r} 同时匹配 {', '.join(hits)}，按 {hits[0]} 处理",
                    field_name=c.name,
                    suggestion="为渠道使用只包含一个标识的名称"
                ))

    counts: Dict[str, int] = {role: 0 for role in config.canal_markers}
    for c in canals:
        role = _canal_role(c.name, config.canal_markers, config.match_mode)
        if role is not None:
            counts[role] += 1

    for role, count in counts.items():
        if count > 1:
            results.append(ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.WARNING,
                message=f"渠道角色 {role} 匹配到 {count} 条渠道，使用最后一条",
                field_name=role
            ))
        elif count == 0:
            results.append(ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.WARNING,
                message=f"渠道角色 {role} 未匹配到任何渠道",
                field_name=role
            ))

    return results


__all__ = [
    'TransferRoute',
    'NetworkTopology',
    'find_region',
    'match_canals',
    'resolve_topology',
    'resolve_legacy_topology',
    'topology_from_canals',
    'validate_canal_names'
]
