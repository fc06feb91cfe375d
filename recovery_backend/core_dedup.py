from .utils_system import normalize_path


class DuplicateAnalyzer:
    def analyze(self, program_list):
        """
        按解析后的目标路径精确去重:
        同一路径出现在多个来源时保留优先级最高的 (AppPaths > Uninstall > Scan)，
        同一来源内保留先出现的。
        """
        exact_map = {}

        for p in program_list:
            key = normalize_path(p.target_path)

            if key in exact_map:
                existing = exact_map[key]
                # rank 越小越优先，相同时保留旧的
                if p.source.rank < existing.source.rank:
                    exact_map[key] = p
            else:
                exact_map[key] = p

        unique = list(exact_map.values())
        # 按 (名称, 路径) 序数排序，保证输出稳定
        unique.sort(key=lambda x: (x.name, x.target_path))
        return unique


# 暴露的简单接口
def aggregate(program_list):
    return DuplicateAnalyzer().analyze(program_list)


def exclude_existing(program_list, existing_names):
    """去掉开始菜单里任意位置已有同名快捷方式的程序"""
    return [p for p in program_list if p.name.lower() not in existing_names]
