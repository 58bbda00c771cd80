#!/usr/bin/env python3
"""
灌渠逐时调水系统命令行接口
==========================

用法:
    python -m acequia.cli run [--scenario NAME | --file PATH] [--hours N] [--by-endpoints] [--output FILE]
    python -m acequia.cli scenarios
    python -m acequia.cli status
"""

import argparse
import json
import logging
import sys


def setup_logging(verbose: bool = False):
    """配置日志系统"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )


def cmd_run(args):
    """运行逐时调度"""
    from .control.balancer import HourlyBalancer
    from .simulation.scenarios import create_scenario, load_scenario_file
    from .network.topology import topology_from_canals

    logger = logging.getLogger('Acequia.CLI')

    try:
        if args.file:
            manager = load_scenario_file(args.file, simulation_max=args.hours)
        else:
            manager = create_scenario(args.scenario, simulation_max=args.hours)
    except (KeyError, ValueError, OSError) as e:
        logger.error(f"场景加载失败: {e}")
        return 1

    print(f"启动仿真...")
    print(f"  场景: {manager.name}")
    print(f"  最大小时数: {manager.simulation_max}")

    topology = None
    if args.by_endpoints:
        topology = topology_from_canals(manager.get_regions(), manager.get_canals())

    balancer = HourlyBalancer(manager, topology=topology, verbose=args.verbose)
    decisions = balancer.run()

    result = manager.result()
    if balancer.feasibility is not None and not balancer.feasibility.is_winnable:
        result.warnings.append(
            f"总水量不足，缺口 {balancer.feasibility.shortfall:.3f}"
        )

    print("\n" + result.summary())
    print(f"\n调水小时数: {sum(1 for d in decisions if d.transfers)}/{len(decisions)}")

    if args.output:
        output_data = result.to_dict()
        output_data['decisions'] = [d.to_dict() for d in decisions]
        with open(args.output, 'w', encoding='utf-8') as f:
            json.dump(output_data, f, indent=2, ensure_ascii=False)
        print(f"\n结果已保存到: {args.output}")

    return 0


def cmd_scenarios(args):
    """列出预置场景"""
    from .simulation.scenarios import PRESET_SCENARIOS

    print("预置场景:")
    for scenario_type, spec in PRESET_SCENARIOS.items():
        print(f"  {scenario_type.value:<12} {spec.description}")
    return 0


def cmd_status(args):
    """显示系统状态"""
    from . import __version__
    from .config.settings import Config

    print("灌渠逐时调水系统")
    print("=" * 40)
    print(f"版本: {__version__}")
    print("\n当前配置:")
    print(json.dumps(Config.to_dict(), indent=2, ensure_ascii=False))
    return 0


def main(argv=None):
    """主入口"""
    parser = argparse.ArgumentParser(
        description='灌渠逐时调水系统命令行工具',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  acequia run --scenario default --hours 24
  acequia run --file scenario.json --by-endpoints -o result.json
  acequia scenarios
  acequia status
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='可用命令')

    # run 命令
    run_parser = subparsers.add_parser('run', help='运行仿真')
    run_parser.add_argument('--scenario', type=str, default='default',
                            help='预置场景名称')
    run_parser.add_argument('--file', '-f', type=str,
                            help='场景 JSON 文件 (优先于 --scenario)')
    run_parser.add_argument('--hours', type=int, default=None,
                            help='最大仿真小时数')
    run_parser.add_argument('--by-endpoints', action='store_true',
                            help='按渠道端点构造路线 (不使用 North/South/East 命名约定)')
    run_parser.add_argument('--verbose', action='store_true',
                            help='详细输出')
    run_parser.add_argument('--output', '-o', type=str,
                            help='输出文件')
    run_parser.set_defaults(func=cmd_run)

    # scenarios 命令
    scenarios_parser = subparsers.add_parser('scenarios', help='列出预置场景')
    scenarios_parser.set_defaults(func=cmd_scenarios)

    # status 命令
    status_parser = subparsers.add_parser('status', help='显示系统状态')
    status_parser.set_defaults(func=cmd_status)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(getattr(args, 'verbose', False))
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
