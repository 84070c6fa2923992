"""分类引擎核心：文字判定、词性标注、分类、短语合并与流程编排。"""
