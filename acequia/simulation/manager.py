"""
灌渠仿真引擎
============

逐时推进的参考仿真:
- 渠道逐秒积分输水
- 区域洪涝/干旱标志
- 罚分与求解判定
"""

import logging
from typing import List, Optional, Sequence

from ..config.settings import SimulationSettings
from ..core.base_config import (
    ConfigValidator, ValidationResult, collect_errors, format_report
)
from ..network.region import Region
from ..network.canal import Canal
from .history import HourRecord, RunResult


logger = logging.getLogger('Acequia.Simulation')


class AcequiaManager:
    """
    灌渠网络仿真上下文

    调度器通过 get_regions / get_canals 读取网络，
    通过 hour / simulation_max / is_solved 判断是否继续，
    通过 next_hour 推进一小时。
    """

    def __init__(self, regions: Sequence[Region], canals: Sequence[Canal],
                 simulation_max: Optional[int] = None,
                 settings: Optional[SimulationSettings] = None,
                 name: str = "custom"):
        self.name = name
        self.settings = settings or SimulationSettings()

        self.regions: List[Region] = list(regions)
        self.canals: List[Canal] = list(canals)

        self.hour = 0
        self.simulation_max = (simulation_max if simulation_max is not None
                               else self.settings.simulation_max)
        self.is_solved = False
        self.penalties = 0

        self.records: List[HourRecord] = []

        errors = collect_errors(self.validate())
        if errors:
            raise ValueError(format_report(errors))

        for r in self.regions:
            r.update_flags()

    def validate(self) -> List[ValidationResult]:
        """验证场景数据"""
        results = []
        for r in self.regions:
            results.extend(r.validate())

        names = [r.name for r in self.regions]
        results.append(ConfigValidator.validate_unique(names, "region"))
        results.append(ConfigValidator.validate_unique([c.name for c in self.canals], "canal"))

        for c in self.canals:
            if c.source is not None:
                results.append(ConfigValidator.validate_member(c.source, names, f"{c.name}.source"))
            if c.destination is not None:
                results.append(ConfigValidator.validate_member(c.destination, names, f"{c.name}.destination"))

        results.append(ConfigValidator.validate_non_negative(self.simulation_max, "simulation_max"))
        return [r for r in results if not r.is_valid]

    def get_regions(self) -> List[Region]:
        return self.regions

    def get_canals(self) -> List[Canal]:
        return self.canals

    def get_region(self, name: str) -> Optional[Region]:
        for r in self.regions:
            if r.name == name:
                return r
        return None

    def next_hour(self):
        """
        推进一小时

        1. 所有开启渠道积分输水
        2. 更新区域标志
        3. 累计罚分
        4. 判定是否已解决
        """
        region_map = {r.name: r for r in self.regions}
        for c in self.canals:
            c.update_water(region_map, self.settings.seconds_per_hour)

        flagged = 0
        for r in self.regions:
            r.update_flags()
            if r.is_flooded or r.is_in_drought:
                flagged += 1
                logger.debug(f"[hour {self.hour}] {r.name} {r.status.name}")

        self.penalties += flagged * self.settings.penalty_per_flag
        self.hour += 1
        self.is_solved = flagged == 0

        self.records.append(HourRecord(
            hour=self.hour,
            regions=[r.get_state() for r in self.regions],
            canals=[c.get_state() for c in self.canals],
            penalties=self.penalties,
            is_solved=self.is_solved
        ))

    def result(self) -> RunResult:
        """汇总运行结果"""
        return RunResult.from_records(
            scenario=self.name,
            records=self.records,
            hours=self.hour,
            is_solved=self.is_solved,
            penalties=self.penalties
        )


__all__ = ['AcequiaManager']
