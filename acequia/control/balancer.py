"""
逐时调度器
==========

每个仿真小时:
1. 关闭所有渠道
2. 按优先级评估输水路线 (均基于本小时开始时的区域状态)
3. 调用仿真引擎推进一小时

运行前做一次可行性检查: 总水量小于总需水量时给出提示，但不改变调度流程。
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..config.settings import BalancerConfig, TopologyConfig
from ..core.base_scheduler import BaseScheduler, ScheduleDecision, TransferCommand
from ..network.region import Region
from ..network.topology import NetworkTopology, resolve_topology, validate_canal_names
from .transfer import close_all_canals, evaluate_transfer


logger = logging.getLogger('Acequia.Balancer')

INFEASIBLE_MESSAGE = (
    ">>> Scenario determined unwinnable based on initial conditions.\n"
    ">>> Simulation will run, but a perfect solution is impossible."
)


@dataclass
class FeasibilityReport:
    """可行性检查结果"""
    total_water: float
    total_need: float

    @property
    def is_winnable(self) -> bool:
        return self.total_water >= self.total_need

    @property
    def shortfall(self) -> float:
        return max(0.0, self.total_need - self.total_water)


def check_feasibility(regions: Iterable[Region]) -> FeasibilityReport:
    """比较全网总水量与总需水量"""
    total_water = 0.0
    total_need = 0.0
    for r in regions:
        total_water += r.water_level
        total_need += r.water_need
    return FeasibilityReport(total_water=total_water, total_need=total_need)


class HourlyBalancer(BaseScheduler):
    """
    逐时贪心调度器

    manager 需提供:
    - get_regions() / get_canals()
    - hour / simulation_max / is_solved
    - next_hour()

    topology 可直接注入 (任意有向图)，否则按 topology_config 的名称约定解析。
    """

    def __init__(self, manager, topology: Optional[NetworkTopology] = None,
                 topology_config: Optional[TopologyConfig] = None,
                 config: Optional[BalancerConfig] = None,
                 verbose: bool = False):
        super().__init__(name="HourlyBalancer")
        self.manager = manager
        self.topology = topology
        self.topology_config = topology_config or TopologyConfig()
        self.config = config or BalancerConfig()
        self.verbose = verbose

        self.feasibility: Optional[FeasibilityReport] = None

    def resolve(self) -> NetworkTopology:
        """解析网络拓扑 (每次运行一次)"""
        if self.topology is None:
            canals = self.manager.get_canals()
            for issue in validate_canal_names(canals, self.topology_config):
                logger.warning(issue.message)
            self.topology = resolve_topology(
                self.manager.get_regions(), canals, self.topology_config
            )

        missing = self.topology.unresolved()
        if missing:
            logger.warning(f"拓扑中未解析的角色: {', '.join(missing)}")
        return self.topology

    def check_feasibility(self) -> FeasibilityReport:
        """运行前可行性检查，仅提示"""
        report = check_feasibility(self.manager.get_regions())
        if not report.is_winnable:
            print(INFEASIBLE_MESSAGE)
            logger.warning(
                f"总水量 {report.total_water:.3f} 小于总需水量 {report.total_need:.3f}，"
                f"缺口 {report.shortfall:.3f}"
            )
        self.feasibility = report
        return report

    def is_running(self) -> bool:
        return (not self.manager.is_solved
                and self.manager.hour < self.manager.simulation_max)

    def generate_schedule(self, hour: int) -> ScheduleDecision:
        """
        生成并下发本小时调度

        Parameters:
            hour: 当前小时

        Returns:
            ScheduleDecision: 本小时开启的渠道及计划水量
        """
        topology = self.topology if self.topology is not None else self.resolve()
        decision = ScheduleDecision(hour=hour)

        close_all_canals(self.manager.get_canals())

        for route in topology.routes:
            amount = evaluate_transfer(route.source, route.destination, route.canal, self.config)
            if amount <= 0.0:
                continue
            command = TransferCommand(
                source=route.source.name,
                destination=route.destination.name,
                canal=route.canal.name,
                amount=amount,
                flow_rate=route.canal.flow_rate
            )
            if command.is_clamped:
                decision.notes.append(
                    f"{command.canal} 开度限幅，实际输水量小于计划 {amount:.3f}"
                )
            decision.transfers.append(command)

        logger.debug(
            f"[hour {hour}] " +
            (", ".join(f"{t.canal}={t.flow_rate:.3f}" for t in decision.transfers)
             or "all canals closed")
        )
        return decision

    def run(self) -> List[ScheduleDecision]:
        """
        运行至终止状态 (已解决或达到最大小时数)

        Returns:
            本次运行的逐时决策
        """
        self.check_feasibility()
        self.resolve()

        decisions = []
        while self.is_running():
            decision = self.generate_schedule(self.manager.hour)
            self.record_decision(decision)
            decisions.append(decision)

            if self.verbose:
                self.print_schedule(decision)

            self.manager.next_hour()

        logger.info(
            f"调度结束: hour={self.manager.hour}, solved={self.manager.is_solved}"
        )
        return decisions


def solve_problems(manager) -> None:
    """按默认三角网络约定运行逐时调度"""
    HourlyBalancer(manager).run()


__all__ = [
    'INFEASIBLE_MESSAGE',
    'FeasibilityReport',
    'check_feasibility',
    'HourlyBalancer',
    'solve_problems'
]
