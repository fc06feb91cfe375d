import re


def parse_selection(text, count):
    """
    解析输入: all / none / q / "1,3-5"，返回 0 起始的下标列表，q 返回 None。
    编号无效时抛 ValueError。
    """
    text = text.strip().lower()
    if text in ('q', 'quit', 'cancel'): return None
    if text in ('', 'none', 'n'): return []
    if text in ('all', 'a', '*'): return list(range(count))

    picked = []
    for part in re.split(r'[,\s]+', text):
        if not part: continue
        if '-' in part:
            lo, hi = (int(x) for x in part.split('-', 1))
            if lo > hi: lo, hi = hi, lo
            numbers = range(lo, hi + 1)
        else:
            numbers = [int(part)]
        for n in numbers:
            if n < 1 or n > count: raise ValueError(f"编号超出范围: {n}")
            if n - 1 not in picked: picked.append(n - 1)
    return picked


def pick_candidates(candidates, input_func=input, output_func=print):
    """控制台版 selector: 先选编号，再可选地改名 (编号=新名称)"""
    for i, app in enumerate(candidates, 1):
        output_func(f"{i:>4}. [{app.source}] {app.name}  ->  {app.target_path}")

    while True:
        try:
            picked = parse_selection(input_func("选择要生成的程序 (如 1,3-5 / all / none, q 取消): "),
                                     len(candidates))
            break
        except ValueError as e:
            output_func(f"输入无效: {e}")
        except EOFError:
            # 标准输入已关闭 (管道等)，按取消处理
            return None
    if not picked:
        return picked

    selected = [candidates[i] for i in picked]
    while True:
        try:
            line = input_func("改名 (格式: 编号=新名称，直接回车结束): ").strip()
        except EOFError:
            return None
        if not line: break
        num, sep, new_name = line.partition('=')
        try:
            idx = int(num) - 1
        except ValueError:
            idx = -1
        # 编号沿用列表里的编号，且必须是已选中的
        if not sep or idx not in picked or not new_name.strip():
            output_func(f"输入无效: {line}")
            continue
        candidates[idx].name = new_name.strip()
    return selected
