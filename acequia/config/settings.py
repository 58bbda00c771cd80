"""
全局配置参数
============

包含逐时调度器的安全系数、网络拓扑约定和仿真运行配置。
"""

from dataclasses import dataclass, field
from typing import Dict, List
from enum import Enum, auto

from ..core.constants import SECONDS_PER_HOUR


class MatchMode(Enum):
    """渠道名称匹配方式"""
    SUBSTRING = auto()   # 名称包含标识字母 (先匹配者优先)
    EXACT = auto()       # 名称完全相同


@dataclass
class BalancerConfig:
    """调度器安全系数"""
    need_floor_ratio: float = 0.8        # 需水量保底比例
    capacity_floor_ratio: float = 0.3    # 库容保底比例
    flood_margin_ratio: float = 0.8      # 可用余量利用比例 (留 20% 防洪)


@dataclass
class RouteSpec:
    """输水路线 (按区域角色与渠道角色描述)"""
    source: str                          # 供水区域角色
    destination: str                     # 受水区域角色
    canal: str                           # 渠道角色


@dataclass
class TopologyConfig:
    """
    网络拓扑配置

    默认值对应北-南-东三角网络:
    A = North->South, B = South->East, C = North->East, D = East->North
    """
    # 区域角色 -> 区域名称
    region_names: Dict[str, str] = field(default_factory=lambda: {
        'north': 'North',
        'south': 'South',
        'east': 'East'
    })

    # 渠道角色 -> 标识 (字典顺序即匹配顺序)
    canal_markers: Dict[str, str] = field(default_factory=lambda: {
        'A': 'A',
        'B': 'B',
        'C': 'C',
        'D': 'D'
    })

    match_mode: MatchMode = MatchMode.SUBSTRING

    # 优先级顺序
    routes: List[RouteSpec] = field(default_factory=lambda: [
        RouteSpec('north', 'south', 'A'),
        RouteSpec('north', 'east', 'C'),
        RouteSpec('south', 'east', 'B'),
        RouteSpec('east', 'north', 'D'),
    ])


@dataclass
class SimulationSettings:
    """仿真运行配置"""
    simulation_max: int = 24                     # 最大仿真小时数
    seconds_per_hour: int = SECONDS_PER_HOUR     # 每小时积分子步数 (s)
    penalty_per_flag: int = 1                    # 每个洪涝/干旱标志的罚分


class Config:
    """全局配置类"""

    balancer = BalancerConfig()
    topology = TopologyConfig()
    simulation = SimulationSettings()

    @classmethod
    def to_dict(cls) -> dict:
        """导出配置为字典"""
        return {
            'balancer': dict(cls.balancer.__dict__),
            'topology': {
                'region_names': dict(cls.topology.region_names),
                'canal_markers': dict(cls.topology.canal_markers),
                'match_mode': cls.topology.match_mode.name,
                'routes': [r.__dict__ for r in cls.topology.routes]
            },
            'simulation': dict(cls.simulation.__dict__)
        }
