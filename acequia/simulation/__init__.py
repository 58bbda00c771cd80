"""
仿真模块
========

- manager: 参考仿真引擎
- history: 逐时记录与运行结果
- scenarios: 预置场景与场景加载
"""

from .history import TimeSeriesData, HourRecord, RunResult
from .manager import AcequiaManager
from .scenarios import (
    ScenarioType,
    ScenarioSpec,
    PRESET_SCENARIOS,
    list_scenarios,
    load_scenario,
    load_scenario_file,
    create_scenario
)

__all__ = [
    'TimeSeriesData',
    'HourRecord',
    'RunResult',
    'AcequiaManager',
    'ScenarioType',
    'ScenarioSpec',
    'PRESET_SCENARIOS',
    'list_scenarios',
    'load_scenario',
    'load_scenario_file',
    'create_scenario'
]
