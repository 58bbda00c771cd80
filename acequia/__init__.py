"""
灌渠逐时调水系统 (Acequia Hourly Water Balancer)
================================================

每个仿真小时决定各渠道的输水量，缓解缺水区域的同时避免
其他区域出现洪涝或干旱，然后推进仿真一小时。

模块结构:
- core: 积分常数、配置验证、调度器基类
- config: 调度系数与拓扑约定
- network: 区域、渠道、拓扑解析
- control: 水量计算、渠道配置、逐时调度
- simulation: 参考仿真引擎与场景库
"""

__version__ = "1.0.0"
__author__ = "Acequia Control Team"

import logging

# 作为库使用时不输出日志，由调用方 (如 cli.setup_logging) 配置
logging.getLogger('Acequia').addHandler(logging.NullHandler())

from .config.settings import Config, BalancerConfig, TopologyConfig, SimulationSettings
from .network import Region, Canal, NetworkTopology, TransferRoute
from .control import (
    compute_safe_surplus,
    compute_deficit,
    close_all_canals,
    schedule_transfer,
    evaluate_transfer,
    check_feasibility,
    HourlyBalancer,
    solve_problems
)
from .simulation import AcequiaManager, RunResult, create_scenario, load_scenario

__all__ = [
    'Config',
    'BalancerConfig',
    'TopologyConfig',
    'SimulationSettings',
    'Region',
    'Canal',
    'NetworkTopology',
    'TransferRoute',
    'compute_safe_surplus',
    'compute_deficit',
    'close_all_canals',
    'schedule_transfer',
    'evaluate_transfer',
    'check_feasibility',
    'HourlyBalancer',
    'solve_problems',
    'AcequiaManager',
    'RunResult',
    'create_scenario',
    'load_scenario'
]
