# Below one recorded out a rate is noise, so it reads as zero.
MIN_INNINGS_PITCHED = 1 / 3

# Stands in for an infinite K:BB (strikeouts with no walks) so sorting and
# display stay well-defined.
K_BB_SENTINEL = 999.0


def era(earned_runs: int, innings_pitched: float) -> float:
    if innings_pitched < MIN_INNINGS_PITCHED:
        return 0.0
    return earned_runs * 9 / innings_pitched


def whip(walks: int, hits: int, innings_pitched: float) -> float:
    if innings_pitched < MIN_INNINGS_PITCHED:
        return 0.0
    return (walks + hits) / innings_pitched


def k_per_9(strikeouts: int, innings_pitched: float) -> float:
    if innings_pitched < MIN_INNINGS_PITCHED:
        return 0.0
    return strikeouts * 9 / innings_pitched


def bb_per_9(walks: int, innings_pitched: float) -> float:
    if innings_pitched < MIN_INNINGS_PITCHED:
        return 0.0
    return walks * 9 / innings_pitched


def k_bb_ratio(strikeouts: int, walks: int) -> float:
    if walks == 0:
        return K_BB_SENTINEL if strikeouts > 0 else 0.0
    return strikeouts / walks


def format_rate(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}"


def format_k_bb(value: float) -> str:
    if value >= K_BB_SENTINEL:
        return "∞"
    return format_rate(value)
