# 二分搜索收敛容差（期数的绝对误差）
SOLVER_TOLERANCE = 1e-5

# 二分搜索最大迭代次数
MAX_BISECTION_ITERATIONS = 200

# 单次模拟的最大期数
MAX_SIMULATION_PERIODS = 1_000_000

# 本金上界相对 payment / rate 渐近线的比例
UPPER_BOUND_RATIO = 0.8

# 反推利率时上界与渐近线的距离
RATE_BRACKET_MARGIN = 1e-6

# 默认示例参数
DEFAULT_INTEREST_RATE = 0.005
DEFAULT_PAYMENT = 300.0
DEFAULT_NUM_PERIODS = 36.0

# 页面配置
PAGE_TITLE = "贷款本金反推"
PAGE_ICON = "🧮"
LAYOUT = "wide"

# 图表配色
COLORS = {
    "primary": "#1f77b4",
    "danger": "#d62728",
    "principal": "#1f77b4",
    "interest": "#ff7f0e",
    "remaining": "#2ca02c",
}

# 金额精度
AMOUNT_PRECISION = 2
