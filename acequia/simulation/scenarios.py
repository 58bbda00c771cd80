"""
场景库
======

预置场景与场景文件加载:
- default: 北-南-东三角网络，南区缺水
- balanced: 各区域均已满足需水，无需调水
- unwinnable: 总水量小于总需水量
- flood_risk: 受水区库容紧张
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Any

from ..config.settings import SimulationSettings
from ..network.region import Region
from ..network.canal import Canal
from .manager import AcequiaManager


class ScenarioType(Enum):
    """预置场景"""
    DEFAULT = "default"
    BALANCED = "balanced"
    UNWINNABLE = "unwinnable"
    FLOOD_RISK = "flood_risk"


@dataclass
class ScenarioSpec:
    """场景描述"""
    name: str
    description: str
    regions: List[Dict[str, Any]]
    canals: List[Dict[str, Any]]
    simulation_max: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'description': self.description,
            'simulation_max': self.simulation_max,
            'regions': [dict(r) for r in self.regions],
            'canals': [dict(c) for c in self.canals]
        }


def _region(name: str, level: float, need: float, capacity: float) -> Dict[str, Any]:
    return {'name': name, 'water_level': level, 'water_need': need, 'water_capacity': capacity}


# 三角网络渠道: A = N->S, B = S->E, C = N->E, D = E->N
_TRIANGLE_CANALS = [
    {'name': 'canal_A', 'source': 'North', 'destination': 'South'},
    {'name': 'canal_B', 'source': 'South', 'destination': 'East'},
    {'name': 'canal_C', 'source': 'North', 'destination': 'East'},
    {'name': 'canal_D', 'source': 'East', 'destination': 'North'},
]


PRESET_SCENARIOS: Dict[ScenarioType, ScenarioSpec] = {
    ScenarioType.DEFAULT: ScenarioSpec(
        name='default',
        description='北区富余，南区缺水',
        regions=[
            _region('North', 100.0, 50.0, 150.0),
            _region('South', 10.0, 60.0, 100.0),
            _region('East', 50.0, 40.0, 80.0),
        ],
        canals=_TRIANGLE_CANALS,
    ),
    ScenarioType.BALANCED: ScenarioSpec(
        name='balanced',
        description='各区域水量均满足需水且不超库容',
        regions=[
            _region('North', 60.0, 50.0, 150.0),
            _region('South', 70.0, 60.0, 100.0),
            _region('East', 50.0, 40.0, 80.0),
        ],
        canals=_TRIANGLE_CANALS,
    ),
    ScenarioType.UNWINNABLE: ScenarioSpec(
        name='unwinnable',
        description='全网总水量小于总需水量',
        regions=[
            _region('North', 30.0, 50.0, 100.0),
            _region('South', 20.0, 60.0, 100.0),
            _region('East', 10.0, 40.0, 80.0),
        ],
        canals=_TRIANGLE_CANALS,
    ),
    ScenarioType.FLOOD_RISK: ScenarioSpec(
        name='flood_risk',
        description='南区严重缺水但库容紧张',
        regions=[
            _region('North', 200.0, 60.0, 220.0),
            _region('South', 5.0, 90.0, 95.0),
            _region('East', 70.0, 60.0, 75.0),
        ],
        canals=_TRIANGLE_CANALS,
    ),
}


def list_scenarios() -> List[str]:
    return [t.value for t in ScenarioType]


def _require(data: Dict[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise ValueError(f"{where} 缺少字段: {key}")
    return data[key]


def load_scenario(data: Dict[str, Any], simulation_max: Optional[int] = None,
                  settings: Optional[SimulationSettings] = None) -> AcequiaManager:
    """
    从字典构造仿真

    Parameters:
        data: {"name", "regions": [...], "canals": [...], "simulation_max"}
        simulation_max: 覆盖场景中的最大小时数
        settings: 仿真配置

    Returns:
        AcequiaManager

    Raises:
        ValueError: 场景数据不完整或不合法
    """
    regions = []
    for i, item in enumerate(_require(data, 'regions', 'scenario')):
        where = f"regions[{i}]"
        regions.append(Region(
            name=_require(item, 'name', where),
            water_level=_require(item, 'water_level', where),
            water_need=_require(item, 'water_need', where),
            water_capacity=_require(item, 'water_capacity', where)
        ))

    canals = []
    for i, item in enumerate(data.get('canals', [])):
        canals.append(Canal(
            name=_require(item, 'name', f"canals[{i}]"),
            source=item.get('source'),
            destination=item.get('destination')
        ))

    if simulation_max is None:
        simulation_max = data.get('simulation_max')

    return AcequiaManager(
        regions, canals,
        simulation_max=simulation_max,
        settings=settings,
        name=data.get('name', 'custom')
    )


def load_scenario_file(path: str, simulation_max: Optional[int] = None) -> AcequiaManager:
    """从 JSON 文件加载场景"""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return load_scenario(data, simulation_max=simulation_max)


def create_scenario(name: str, simulation_max: Optional[int] = None) -> AcequiaManager:
    """
    创建预置场景

    Raises:
        KeyError: 未知场景名称
    """
    try:
        scenario_type = ScenarioType(name)
    except ValueError:
        raise KeyError(f"未知场景: {name} (可选: {', '.join(list_scenarios())})")

    spec = PRESET_SCENARIOS[scenario_type]
    return load_scenario(spec.to_dict(), simulation_max=simulation_max)


__all__ = [
    'ScenarioType',
    'ScenarioSpec',
    'PRESET_SCENARIOS',
    'list_scenarios',
    'load_scenario',
    'load_scenario_file',
    'create_scenario'
]
