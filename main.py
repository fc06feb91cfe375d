import sys
import argparse
import recovery_backend as backend


def build_parser():
    parser = argparse.ArgumentParser(
        description="找出已安装但没有开始菜单快捷方式的程序，并重新生成快捷方式"
    )
    parser.add_argument('--all-users', action=argparse.BooleanOptionalAction, default=None,
                        help="写入所有用户的开始菜单 (需要管理员权限)，--no-all-users 覆盖配置文件")
    parser.add_argument('--budget', type=int, default=None,
                        help="目录扫描最多检查的 exe 数量，0 表示不限 (默认 5000)")
    parser.add_argument('--scan-root', action='append', default=[], metavar='PATH',
                        help="额外的扫描目录，可重复指定")
    parser.add_argument('--folder', default=None, metavar='NAME',
                        help="开始菜单下的目标子目录 (默认 Recovered)")
    parser.add_argument('--preview', action='store_true', default=None,
                        help="只列出结果，不写入任何文件")
    parser.add_argument('--auto', action='store_true', default=None,
                        help="不弹出选择界面，全部生成")
    parser.add_argument('--console', action='store_true',
                        help="使用控制台选择代替图形界面")
    parser.add_argument('--config', default=backend.CONFIG_FILE, metavar='PATH',
                        help="配置文件路径")
    parser.add_argument('-v', '--verbose', action='store_true', help="输出调试日志")
    return parser


def apply_args(options, args):
    """命令行参数覆盖配置文件"""
    if args.all_users is not None: options.all_users = args.all_users
    if args.budget is not None: options.inspection_budget = args.budget if args.budget > 0 else None
    if args.scan_root: options.extra_scan_roots = options.extra_scan_roots + args.scan_root
    if args.folder: options.destination_subfolder = args.folder
    if args.preview is not None: options.preview = args.preview
    if args.auto is not None: options.auto = args.auto
    return options


def get_selector(args):
    if args.console:
        from ui.console_picker import pick_candidates
        return pick_candidates
    from ui.dialog_select import select_with_dialog
    return select_with_dialog


def print_report(report):
    if report.preview:
        for app in report.candidates:
            print(f"[预览] [{app.source}] {app.name}  ->  {app.target_path}")
        print(f"共 {len(report.candidates)} 个候选程序，开始菜单中已有 {len(report.existing_names)} 个快捷方式")
        return

    if report.cancelled or not report.selected:
        print("未选择任何程序，没有生成快捷方式。")
        return

    for r in report.results:
        if r.ok:
            print(f"✔ {r.name}  ->  {r.launcher_path}")
        else:
            print(f"✘ [{r.failure}] {r.name}: {r.detail}")
    print(f"完成: 成功 {len(report.succeeded)} 个，失败 {len(report.failed)} 个。目录: {report.destination}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        config = backend.load_config(args.config)
        log_level = 'DEBUG' if args.verbose else config[backend.CONFIG_SECTION]['log_level']
        backend.init_environment(log_level)

        options = apply_args(backend.options_from_config(config), args)
        selector = None if (options.auto or options.preview) else get_selector(args)
        denylist, _ = backend.load_denylist()
        report = backend.run_recovery(options, selector, denylist=denylist)
    except backend.RecoveryError as e:
        print(f"错误: {e}", file=sys.stderr)
        return 1

    print_report(report)
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
