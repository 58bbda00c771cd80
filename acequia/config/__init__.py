"""
配置模块
========

- settings: 调度系数、拓扑约定、仿真配置
"""
from .settings import (
    Config,
    MatchMode,
    BalancerConfig,
    RouteSpec,
    TopologyConfig,
    SimulationSettings
)

__all__ = [
    'Config',
    'MatchMode',
    'BalancerConfig',
    'RouteSpec',
    'TopologyConfig',
    'SimulationSettings'
]
