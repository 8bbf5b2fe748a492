"""Schedule of Basic Child Support Obligations (BCSO) for Alabama Rule 32.

The schedule maps a combined monthly adjusted gross income (CAGI) and a
number of children to the basic child support obligation, in whole dollars.
It is a step function: each bracket covers an inclusive income range and
carries one amount per child count (1 through 6).

Amounts are reference data and must match the published schedule exactly.
Load the published table from CSV with ``BcsoSchedule.from_csv`` (or
``FAIRSHARE_SCHEDULE_PATH``). The bundled brackets ($0 to $20,099 in $100
steps) are a provisional stand-in, not a copy of the published schedule:
``DEFAULT_SCHEDULE.provisional`` is True and the catalog logs a warning
while it is in use.

Edge policy: an income below the first bracket resolves to the first
bracket and an income above the last bracket resolves to the last bracket.
Schedules built with ``clamp=False`` reject such incomes instead.
"""

import csv
from bisect import bisect_right
from pathlib import Path
from typing import Iterable, NamedTuple, Optional, Union

from .exceptions import ConfigurationError, ValidationError


# =============================================================================
# VERSION TRACKING
# =============================================================================

BCSO_SCHEDULE_VERSION = "AL-R32-provisional-1"
MAX_CHILDREN = 6

CSV_HEADER = ["low", "high"] + [str(n) for n in range(1, MAX_CHILDREN + 1)]


class BcsoBracket(NamedTuple):
    """One income bracket of the schedule."""

    low: int
    high: int
    amounts: tuple[int, ...]  # index 0 is one child

    def amount_for(self, number_of_children: int) -> int:
        return self.amounts[number_of_children - 1]


# =============================================================================
# PROVISIONAL SCHEDULE DATA
# =============================================================================
# (low, high, 1 child, 2 children, 3 children, 4 children, 5 children, 6 children)

_BCSO_ROWS: tuple[tuple[int, ...], ...] = (
    (0, 99, 13, 18, 21, 24, 26, 28),
    (100, 199, 38, 54, 64, 71, 78, 84),
    (200, 299, 63, 91, 106, 119, 130, 141),
    (300, 399, 88, 127, 149, 166, 182, 197),
    (400, 499, 113, 163, 191, 214, 234, 253),
    (500, 599, 138, 199, 234, 261, 286, 309),
    (600, 699, 163, 236, 276, 309, 338, 366),
    (700, 799, 188, 272, 319, 356, 390, 422),
    (800, 899, 213, 308, 361, 404, 442, 478),
    (900, 999, 238, 344, 404, 451, 494, 534),
    (1000, 1099, 263, 381, 446, 499, 546, 591),
    (1100, 1199, 288, 417, 489, 546, 598, 647),
    (1200, 1299, 313, 453, 531, 594, 650, 703),
    (1300, 1399, 338, 489, 574, 641, 702, 759),
    (1400, 1499, 363, 526, 616, 689, 754, 816),
    (1500, 1599, 385, 558, 655, 732, 801, 867),
    (1600, 1699, 405, 588, 689, 770, 843, 912),
    (1700, 1799, 425, 616, 723, 808, 884, 956),
    (1800, 1899, 445, 645, 756, 845, 925, 1000),
    (1900, 1999, 464, 673, 789, 882, 965, 1044),
    (2000, 2099, 483, 700, 821, 918, 1005, 1087),
    (2100, 2199, 502, 728, 853, 954, 1044, 1129),
    (2200, 2299, 521, 755, 885, 989, 1083, 1171),
    (2300, 2399, 539, 782, 916, 1024, 1121, 1213),
    (2400, 2499, 557, 808, 947, 1059, 1159, 1254),
    (2500, 2599, 575, 834, 978, 1093, 1197, 1294),
    (2600, 2699, 593, 860, 1008, 1127, 1234, 1335),
    (2700, 2799, 611, 886, 1038, 1161, 1271, 1374),
    (2800, 2899, 628, 911, 1068, 1194, 1307, 1414),
    (2900, 2999, 646, 936, 1098, 1227, 1343, 1453),
    (3000, 3099, 663, 961, 1127, 1260, 1379, 1492),
    (3100, 3199, 680, 986, 1156, 1292, 1414, 1530),
    (3200, 3299, 697, 1011, 1185, 1324, 1450, 1568),
    (3300, 3399, 714, 1035, 1213, 1356, 1484, 1606),
    (3400, 3499, 730, 1059, 1242, 1388, 1519, 1643),
    (3500, 3599, 747, 1083, 1270, 1419, 1553, 1680),
    (3600, 3699, 763, 1107, 1297, 1450, 1587, 1717),
    (3700, 3799, 779, 1130, 1325, 1481, 1621, 1754),
    (3800, 3899, 796, 1154, 1352, 1512, 1655, 1790),
    (3900, 3999, 812, 1177, 1380, 1542, 1688, 1826),
    (4000, 4099, 827, 1200, 1407, 1572, 1721, 1862),
    (4100, 4199, 843, 1223, 1433, 1602, 1754, 1897),
    (4200, 4299, 859, 1245, 1460, 1632, 1787, 1933),
    (4300, 4399, 874, 1268, 1487, 1661, 1819, 1968),
    (4400, 4499, 890, 1290, 1513, 1691, 1851, 2002),
    (4500, 4599, 905, 1313, 1539, 1720, 1883, 2037),
    (4600, 4699, 920, 1335, 1565, 1749, 1915, 2071),
    (4700, 4799, 936, 1357, 1591, 1778, 1946, 2105),
    (4800, 4899, 951, 1378, 1616, 1806, 1977, 2139),
    (4900, 4999, 966, 1400, 1642, 1835, 2009, 2173),
    (5000, 5099, 981, 1422, 1667, 1863, 2039, 2206),
    (5100, 5199, 995, 1443, 1692, 1891, 2070, 2239),
    (5200, 5299, 1010, 1464, 1717, 1919, 2101, 2272),
    (5300, 5399, 1025, 1486, 1742, 1947, 2131, 2305),
    (5400, 5499, 1039, 1507, 1766, 1974, 2161, 2338),
    (5500, 5599, 1053, 1528, 1791, 2002, 2191, 2370),
    (5600, 5699, 1068, 1548, 1815, 2029, 2221, 2403),
    (5700, 5799, 1082, 1569, 1840, 2056, 2251, 2435),
    (5800, 5899, 1096, 1590, 1864, 2083, 2280, 2467),
    (5900, 5999, 1110, 1610, 1888, 2110, 2310, 2498),
    (6000, 6099, 1124, 1630, 1911, 2136, 2339, 2530),
    (6100, 6199, 1138, 1651, 1935, 2163, 2368, 2561),
    (6200, 6299, 1152, 1671, 1959, 2189, 2397, 2592),
    (6300, 6399, 1166, 1691, 1982, 2215, 2425, 2624),
    (6400, 6499, 1180, 1711, 2006, 2241, 2454, 2654),
    (6500, 6599, 1193, 1730, 2029, 2267, 2482, 2685),
    (6600, 6699, 1207, 1750, 2052, 2293, 2510, 2716),
    (6700, 6799, 1220, 1770, 2075, 2319, 2539, 2746),
    (6800, 6899, 1234, 1789, 2098, 2344, 2567, 2776),
    (6900, 6999, 1247, 1809, 2120, 2370, 2594, 2806),
    (7000, 7099, 1261, 1828, 2143, 2395, 2622, 2836),
    (7100, 7199, 1274, 1847, 2166, 2420, 2650, 2866),
    (7200, 7299, 1287, 1866, 2188, 2445, 2677, 2896),
    (7300, 7399, 1300, 1885, 2210, 2470, 2704, 2925),
    (7400, 7499, 1313, 1904, 2233, 2495, 2732, 2955),
    (7500, 7599, 1326, 1923, 2255, 2520, 2759, 2984),
    (7600, 7699, 1339, 1942, 2277, 2544, 2785, 3013),
    (7700, 7799, 1352, 1960, 2298, 2569, 2812, 3042),
    (7800, 7899, 1365, 1979, 2320, 2593, 2839, 3071),
    (7900, 7999, 1378, 1998, 2342, 2617, 2865, 3100),
    (8000, 8099, 1390, 2016, 2364, 2642, 2892, 3128),
    (8100, 8199, 1403, 2034, 2385, 2666, 2918, 3157),
    (8200, 8299, 1416, 2053, 2406, 2690, 2944, 3185),
    (8300, 8399, 1428, 2071, 2428, 2713, 2970, 3213),
    (8400, 8499, 1441, 2089, 2449, 2737, 2996, 3241),
    (8500, 8599, 1453, 2107, 2470, 2761, 3022, 3269),
    (8600, 8699, 1465, 2125, 2491, 2784, 3048, 3297),
    (8700, 8799, 1478, 2143, 2512, 2808, 3074, 3325),
    (8800, 8899, 1490, 2160, 2533, 2831, 3099, 3352),
    (8900, 8999, 1502, 2178, 2554, 2854, 3124, 3380),
    (9000, 9099, 1514, 2196, 2574, 2877, 3150, 3407),
    (9100, 9199, 1526, 2213, 2595, 2900, 3175, 3434),
    (9200, 9299, 1538, 2231, 2615, 2923, 3200, 3462),
    (9300, 9399, 1550, 2248, 2636, 2946, 3225, 3489),
    (9400, 9499, 1562, 2265, 2656, 2969, 3250, 3515),
    (9500, 9599, 1574, 2283, 2676, 2991, 3275, 3542),
    (9600, 9699, 1586, 2300, 2697, 3014, 3299, 3569),
    (9700, 9799, 1598, 2317, 2717, 3036, 3324, 3595),
    (9800, 9899, 1610, 2334, 2737, 3059, 3348, 3622),
    (9900, 9999, 1621, 2351, 2757, 3081, 3373, 3648),
    (10000, 10099, 1633, 2368, 2776, 3103, 3397, 3675),
    (10100, 10199, 1645, 2385, 2796, 3125, 3421, 3701),
    (10200, 10299, 1656, 2402, 2816, 3147, 3445, 3727),
    (10300, 10399, 1668, 2418, 2835, 3169, 3469, 3753),
    (10400, 10499, 1679, 2435, 2855, 3191, 3493, 3779),
    (10500, 10599, 1691, 2452, 2874, 3213, 3517, 3804),
    (10600, 10699, 1702, 2468, 2894, 3234, 3541, 3830),
    (10700, 10799, 1714, 2485, 2913, 3256, 3564, 3856),
    (10800, 10899, 1725, 2501, 2932, 3277, 3588, 3881),
    (10900, 10999, 1736, 2518, 2952, 3299, 3611, 3906),
    (11000, 11099, 1747, 2534, 2971, 3320, 3635, 3932),
    (11100, 11199, 1759, 2550, 2990, 3341, 3658, 3957),
    (11200, 11299, 1770, 2566, 3009, 3363, 3681, 3982),
    (11300, 11399, 1781, 2582, 3028, 3384, 3704, 4007),
    (11400, 11499, 1792, 2598, 3046, 3405, 3727, 4032),
    (11500, 11599, 1803, 2614, 3065, 3426, 3750, 4057),
    (11600, 11699, 1814, 2630, 3084, 3447, 3773, 4081),
    (11700, 11799, 1825, 2646, 3102, 3467, 3796, 4106),
    (11800, 11899, 1836, 2662, 3121, 3488, 3819, 4131),
    (11900, 11999, 1847, 2678, 3139, 3509, 3841, 4155),
    (12000, 12099, 1858, 2693, 3158, 3529, 3864, 4180),
    (12100, 12199, 1868, 2709, 3176, 3550, 3886, 4204),
    (12200, 12299, 1879, 2725, 3194, 3570, 3909, 4228),
    (12300, 12399, 1890, 2740, 3213, 3591, 3931, 4252),
    (12400, 12499, 1901, 2756, 3231, 3611, 3953, 4276),
    (12500, 12599, 1911, 2771, 3249, 3631, 3975, 4300),
    (12600, 12699, 1922, 2787, 3267, 3651, 3997, 4324),
    (12700, 12799, 1932, 2802, 3285, 3671, 4019, 4348),
    (12800, 12899, 1943, 2817, 3303, 3691, 4041, 4372),
    (12900, 12999, 1953, 2832, 3321, 3711, 4063, 4395),
    (13000, 13099, 1964, 2848, 3339, 3731, 4085, 4419),
    (13100, 13199, 1974, 2863, 3356, 3751, 4107, 4442),
    (13200, 13299, 1985, 2878, 3374, 3771, 4128, 4466),
    (13300, 13399, 1995, 2893, 3392, 3791, 4150, 4489),
    (13400, 13499, 2005, 2908, 3409, 3810, 4171, 4512),
    (13500, 13599, 2016, 2923, 3427, 3830, 4193, 4535),
    (13600, 13699, 2026, 2938, 3444, 3849, 4214, 4558),
    (13700, 13799, 2036, 2952, 3461, 3869, 4235, 4581),
    (13800, 13899, 2046, 2967, 3479, 3888, 4256, 4604),
    (13900, 13999, 2056, 2982, 3496, 3907, 4278, 4627),
    (14000, 14099, 2067, 2997, 3513, 3927, 4299, 4650),
    (14100, 14199, 2077, 3011, 3530, 3946, 4320, 4673),
    (14200, 14299, 2087, 3026, 3548, 3965, 4340, 4695),
    (14300, 14399, 2097, 3040, 3565, 3984, 4361, 4718),
    (14400, 14499, 2107, 3055, 3582, 4003, 4382, 4740),
    (14500, 14599, 2117, 3069, 3599, 4022, 4403, 4763),
    (14600, 14699, 2127, 3084, 3615, 4041, 4424, 4785),
    (14700, 14799, 2137, 3098, 3632, 4060, 4444, 4807),
    (14800, 14899, 2146, 3112, 3649, 4078, 4465, 4830),
    (14900, 14999, 2156, 3127, 3666, 4097, 4485, 4852),
    (15000, 15099, 2166, 3141, 3682, 4116, 4506, 4874),
    (15100, 15199, 2176, 3155, 3699, 4134, 4526, 4896),
    (15200, 15299, 2186, 3169, 3716, 4153, 4546, 4918),
    (15300, 15399, 2195, 3183, 3732, 4171, 4566, 4940),
    (15400, 15499, 2205, 3197, 3749, 4190, 4586, 4961),
    (15500, 15599, 2215, 3211, 3765, 4208, 4607, 4983),
    (15600, 15699, 2224, 3225, 3781, 4226, 4627, 5005),
    (15700, 15799, 2234, 3239, 3798, 4244, 4647, 5026),
    (15800, 15899, 2243, 3253, 3814, 4263, 4666, 5048),
    (15900, 15999, 2253, 3267, 3830, 4281, 4686, 5069),
    (16000, 16099, 2263, 3281, 3846, 4299, 4706, 5091),
    (16100, 16199, 2272, 3294, 3862, 4317, 4726, 5112),
    (16200, 16299, 2281, 3308, 3879, 4335, 4745, 5133),
    (16300, 16399, 2291, 3322, 3895, 4353, 4765, 5155),
    (16400, 16499, 2300, 3335, 3911, 4371, 4785, 5176),
    (16500, 16599, 2310, 3349, 3926, 4388, 4804, 5197),
    (16600, 16699, 2319, 3363, 3942, 4406, 4824, 5218),
    (16700, 16799, 2328, 3376, 3958, 4424, 4843, 5239),
    (16800, 16899, 2338, 3390, 3974, 4441, 4862, 5260),
    (16900, 16999, 2347, 3403, 3990, 4459, 4882, 5280),
    (17000, 17099, 2356, 3416, 4005, 4477, 4901, 5301),
    (17100, 17199, 2365, 3430, 4021, 4494, 4920, 5322),
    (17200, 17299, 2374, 3443, 4037, 4512, 4939, 5343),
    (17300, 17399, 2384, 3456, 4052, 4529, 4958, 5363),
    (17400, 17499, 2393, 3470, 4068, 4546, 4977, 5384),
    (17500, 17599, 2402, 3483, 4083, 4564, 4996, 5404),
    (17600, 17699, 2411, 3496, 4099, 4581, 5015, 5425),
    (17700, 17799, 2420, 3509, 4114, 4598, 5034, 5445),
    (17800, 17899, 2429, 3522, 4129, 4615, 5052, 5465),
    (17900, 17999, 2438, 3535, 4145, 4632, 5071, 5486),
    (18000, 18099, 2447, 3548, 4160, 4649, 5090, 5506),
    (18100, 18199, 2456, 3561, 4175, 4666, 5108, 5526),
    (18200, 18299, 2465, 3574, 4190, 4683, 5127, 5546),
    (18300, 18399, 2474, 3587, 4205, 4700, 5145, 5566),
    (18400, 18499, 2483, 3600, 4220, 4717, 5164, 5586),
    (18500, 18599, 2491, 3613, 4235, 4734, 5182, 5606),
    (18600, 18699, 2500, 3625, 4250, 4751, 5201, 5626),
    (18700, 18799, 2509, 3638, 4265, 4767, 5219, 5645),
    (18800, 18899, 2518, 3651, 4280, 4784, 5237, 5665),
    (18900, 18999, 2527, 3664, 4295, 4800, 5255, 5685),
    (19000, 19099, 2535, 3676, 4310, 4817, 5273, 5704),
    (19100, 19199, 2544, 3689, 4325, 4834, 5292, 5724),
    (19200, 19299, 2553, 3701, 4340, 4850, 5310, 5743),
    (19300, 19399, 2561, 3714, 4354, 4866, 5328, 5763),
    (19400, 19499, 2570, 3726, 4369, 4883, 5345, 5782),
    (19500, 19599, 2579, 3739, 4384, 4899, 5363, 5802),
    (19600, 19699, 2587, 3751, 4398, 4916, 5381, 5821),
    (19700, 19799, 2596, 3764, 4413, 4932, 5399, 5840),
    (19800, 19899, 2604, 3776, 4427, 4948, 5417, 5859),
    (19900, 19999, 2613, 3788, 4442, 4964, 5434, 5879),
    (20000, 20099, 2621, 3801, 4456, 4980, 5452, 5898),
)


# =============================================================================
# SCHEDULE
# =============================================================================


class BcsoSchedule:
    """Immutable, validated BCSO lookup table.

    Instances are safe to share between threads; nothing is mutated after
    construction.

    ``provisional`` marks tables that are not a copy of the published
    schedule.
    """

    def __init__(
        self,
        brackets: Iterable[BcsoBracket],
        *,
        clamp: bool = True,
        version: str = BCSO_SCHEDULE_VERSION,
        provisional: bool = False,
    ) -> None:
        self._brackets: tuple[BcsoBracket, ...] = tuple(brackets)
        self._lows: tuple[int, ...] = tuple(b.low for b in self._brackets)
        self.clamp = clamp
        self.version = version
        self.provisional = provisional
        self._validate()

    def _validate(self) -> None:
        """Check the table shape: non-empty, contiguous, non-decreasing."""
        if not self._brackets:
            raise ConfigurationError(
                "BCSO schedule has no brackets",
                config_key="schedule",
                expected="at least one income bracket",
            )

        previous: Optional[BcsoBracket] = None
        for bracket in self._brackets:
            if len(bracket.amounts) != MAX_CHILDREN:
                raise ConfigurationError(
                    f"Bracket starting at {bracket.low} has {len(bracket.amounts)} amounts",
                    config_key="schedule",
                    expected=f"{MAX_CHILDREN} amounts per bracket",
                    actual=len(bracket.amounts),
                )
            if bracket.high < bracket.low:
                raise ConfigurationError(
                    f"Bracket {bracket.low}-{bracket.high} is inverted",
                    config_key="schedule",
                    expected="low <= high",
                )
            if previous is not None:
                if bracket.low != previous.high + 1:
                    raise ConfigurationError(
                        f"Bracket starting at {bracket.low} does not follow {previous.high}",
                        config_key="schedule",
                        expected=f"low == {previous.high + 1}",
                        actual=bracket.low,
                    )
                for before, after in zip(previous.amounts, bracket.amounts):
                    if after < before:
                        raise ConfigurationError(
                            f"Amounts decrease at bracket starting at {bracket.low}",
                            config_key="schedule",
                            expected="amounts non-decreasing in income",
                        )
            previous = bracket

    @property
    def brackets(self) -> tuple[BcsoBracket, ...]:
        return self._brackets

    @property
    def min_income(self) -> int:
        """Lowest income covered by the first bracket."""
        return self._brackets[0].low

    @property
    def max_income(self) -> int:
        """Highest income covered by the last bracket."""
        return self._brackets[-1].high

    def with_clamp(self, clamp: bool) -> "BcsoSchedule":
        """Return a schedule with the same brackets and the given edge policy."""
        return BcsoSchedule(
            self._brackets, clamp=clamp, version=self.version, provisional=self.provisional
        )

    def bracket_for(self, combined_adjusted_gross_income: int) -> BcsoBracket:
        """Find the bracket covering an income, applying the edge policy.

        Raises:
            ValidationError: If the income is outside the table and the
                schedule does not clamp.
        """
        cagi = combined_adjusted_gross_income
        if not self.clamp and not (self.min_income <= cagi <= self.max_income):
            raise ValidationError(
                f"Combined adjusted gross income {cagi} is outside the schedule "
                f"range {self.min_income}-{self.max_income}.",
                field="combinedAdjustedGrossIncome",
                value=cagi,
                constraint=f"{self.min_income} <= value <= {self.max_income}",
            )

        if cagi > self.max_income:
            return self._brackets[-1]
        index = bisect_right(self._lows, cagi) - 1
        return self._brackets[max(index, 0)]

    def get(self, combined_adjusted_gross_income: int, number_of_children: int) -> int:
        """Look up the basic child support obligation.

        Args:
            combined_adjusted_gross_income: Combined monthly adjusted gross
                income of both parents, in whole dollars
            number_of_children: Children covered by the order (1-6)

        Returns:
            Basic child support obligation in whole dollars

        Raises:
            ValidationError: For an unsupported child count, or an income
                outside the table when clamping is off.
        """
        if not 1 <= number_of_children <= MAX_CHILDREN:
            raise ValidationError(
                f"Number of children must be between 1 and {MAX_CHILDREN}.",
                field="numberOfChildren",
                value=number_of_children,
                constraint=f"1 <= value <= {MAX_CHILDREN}",
            )
        return self.bracket_for(combined_adjusted_gross_income).amount_for(number_of_children)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Iterable[int]],
        *,
        clamp: bool = True,
        version: str = BCSO_SCHEDULE_VERSION,
        provisional: bool = False,
    ) -> "BcsoSchedule":
        """Build a schedule from ``(low, high, amount_1, ..., amount_6)`` rows."""
        brackets = []
        for row in rows:
            low, high, *amounts = row
            brackets.append(BcsoBracket(low=low, high=high, amounts=tuple(amounts)))
        return cls(brackets, clamp=clamp, version=version, provisional=provisional)

    @classmethod
    def from_csv(
        cls,
        path: Union[str, Path],
        *,
        clamp: bool = True,
        version: Optional[str] = None,
    ) -> "BcsoSchedule":
        """Load a schedule from a CSV file with header ``low,high,1,2,3,4,5,6``.

        Raises:
            ConfigurationError: If the file is missing or malformed.
        """
        path = Path(path)
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                if reader.fieldnames is None or [h.strip() for h in reader.fieldnames] != CSV_HEADER:
                    raise ConfigurationError(
                        f"Unexpected schedule header in {path}",
                        config_key="schedule_path",
                        expected=",".join(CSV_HEADER),
                        actual=reader.fieldnames,
                    )
                rows = []
                for line_number, record in enumerate(reader, start=2):
                    try:
                        rows.append(tuple(int(record[h]) for h in reader.fieldnames))
                    except (TypeError, ValueError) as e:
                        raise ConfigurationError(
                            f"Invalid schedule value on line {line_number} of {path}",
                            config_key="schedule_path",
                            expected="whole dollar amounts",
                            details={"line": line_number},
                        ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read schedule file {path}: {e}",
                config_key="schedule_path",
                actual=str(path),
            ) from e

        return cls.from_rows(rows, clamp=clamp, version=version or path.stem)

    def to_csv(self, path: Union[str, Path]) -> None:
        """Write the schedule in the format ``from_csv`` reads."""
        with Path(path).open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            for bracket in self._brackets:
                writer.writerow([bracket.low, bracket.high, *bracket.amounts])


DEFAULT_SCHEDULE = BcsoSchedule.from_rows(_BCSO_ROWS, provisional=True)


def get_bcso_schedule_version() -> str:
    """Return the bundled schedule version."""
    return BCSO_SCHEDULE_VERSION


def get_basic_child_support_obligation(
    number_of_children: int,
    combined_adjusted_gross_income: int,
    schedule: Optional[BcsoSchedule] = None,
) -> int:
    """Get the BCSO for a child count and combined adjusted gross income.

    Args:
        number_of_children: Children covered by the order
        combined_adjusted_gross_income: Combined monthly adjusted gross income
        schedule: Schedule to use (default: bundled schedule)

    Returns:
        Basic child support obligation in whole dollars
    """
    return (schedule or DEFAULT_SCHEDULE).get(combined_adjusted_gross_income, number_of_children)
