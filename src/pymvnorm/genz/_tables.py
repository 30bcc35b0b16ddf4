"""Optimal Korobov lattice parameters.

Prime lattice sizes and generator constants from Genz's DKBVRC, after
Keast (1973) and Cranley & Patterson (1976). Row ``i`` of ``GENERATORS``
belongs to ``PRIMES[i]``; column ``j`` is used for integrals of dimension
``j + 2`` and every dimension above 100 uses the last column.
"""

from __future__ import annotations

import numpy as np

PRIMES = np.array([
    31, 47, 73, 113, 173, 263, 397, 593, 907, 1361, 2053, 3079, 4621, 6947,
    10427, 15641, 23473, 35221, 52837, 79259, 118891, 178349, 267523,
    401287, 601943, 902933, 1354471, 2031713,
], dtype=np.int64)

N_SIZES = PRIMES.shape[0]
N_GENERATOR_DIMS = 100

GENERATORS = np.array([
    [12, 9, 9, 13, 12, 12, 12, 12, 12, 12, 12, 12, 3, 3, 3, 12, 7, 7, 12, 12,
     12, 12, 12, 12, 12, 12, 12, 3, 3, 3, 12, 7, 7, 12, 12, 12, 12, 12, 12,
     12, 12, 12, 3, 3, 3, 12, 7, 7, 12, 12, 12, 12, 12, 12, 12, 12, 12, 3, 3,
     3, 12, 7, 7, 12, 12, 12, 12, 12, 12, 12, 12, 7, 3, 3, 3, 7, 7, 7, 3, 3,
     3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3],
    [13, 11, 17, 10, 15, 15, 15, 15, 15, 15, 22, 15, 15, 6, 6, 6, 15, 15, 9,
     13, 2, 2, 2, 13, 11, 11, 10, 15, 15, 15, 15, 15, 15, 15, 15, 15, 6, 6, 6,
     15, 15, 9, 13, 2, 2, 2, 13, 11, 11, 10, 15, 15, 15, 15, 15, 15, 15, 15,
     15, 6, 6, 6, 15, 15, 9, 13, 2, 2, 2, 13, 11, 11, 10, 10, 15, 15, 15, 15,
     15, 15, 15, 15, 6, 2, 3, 2, 3, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2],
    [27, 28, 10, 11, 11, 20, 11, 11, 28, 13, 13, 28, 13, 13, 13, 14, 14, 14,
     14, 14, 14, 14, 14, 14, 14, 14, 14, 14, 14, 14, 14, 31, 31, 5, 5, 5, 31,
     13, 11, 11, 11, 11, 11, 11, 13, 13, 13, 13, 13, 13, 13, 14, 14, 14, 14,
     14, 14, 14, 14, 14, 14, 14, 14, 14, 14, 14, 14, 31, 31, 5, 5, 5, 11, 13,
     11, 11, 11, 11, 11, 11, 11, 13, 13, 11, 13, 5, 5, 5, 5, 14, 13, 5, 5, 5,
     5, 5, 5, 5, 5],
    [35, 27, 27, 36, 22, 29, 29, 20, 45, 5, 5, 5, 21, 21, 21, 21, 21, 21, 21,
     21, 21, 21, 21, 21, 21, 21, 21, 21, 29, 17, 17, 17, 17, 17, 17, 17, 17,
     17, 17, 23, 23, 23, 23, 23, 23, 23, 23, 23, 23, 23, 23, 21, 27, 3, 3, 3,
     24, 27, 27, 17, 29, 29, 29, 17, 5, 5, 5, 5, 21, 21, 21, 21, 21, 21, 21,
     21, 21, 21, 21, 21, 21, 21, 21, 21, 17, 17, 17, 6, 17, 17, 6, 3, 6, 6, 3,
     3, 3, 3, 3],
    [64, 66, 28, 28, 44, 44, 55, 67, 10, 10, 10, 10, 10, 10, 38, 38, 10, 10,
     10, 10, 10, 49, 49, 49, 49, 49, 49, 49, 49, 49, 49, 49, 49, 38, 38, 31,
     4, 4, 31, 64, 4, 4, 4, 64, 45, 45, 45, 45, 45, 45, 66, 66, 66, 66, 66,
     66, 66, 66, 66, 66, 66, 66, 66, 66, 66, 66, 66, 66, 66, 11, 66, 66, 66,
     66, 66, 66, 66, 66, 66, 45, 11, 7, 3, 2, 2, 2, 27, 5, 3, 3, 5, 5, 2, 2,
     2, 2, 2, 2, 2],
    [111, 42, 54, 118, 20, 31, 31, 72, 17, 94, 14, 14, 11, 14, 14, 14, 94, 10,
     10, 10, 10, 14, 14, 14, 14, 14, 14, 14, 11, 11, 11, 8, 8, 8, 8, 8, 8, 8,
     18, 18, 18, 18, 18, 113, 62, 62, 45, 45, 113, 113, 113, 113, 113, 113,
     113, 113, 113, 113, 113, 113, 113, 113, 113, 113, 113, 63, 63, 53, 63,
     67, 67, 67, 67, 67, 67, 67, 67, 67, 67, 67, 67, 67, 67, 67, 51, 51, 51,
     51, 51, 12, 51, 12, 51, 5, 3, 3, 2, 2, 5],
    [163, 154, 83, 43, 82, 92, 150, 59, 76, 76, 47, 11, 11, 100, 131, 116,
     116, 116, 116, 116, 116, 138, 138, 138, 138, 138, 138, 138, 138, 138,
     101, 101, 101, 101, 101, 101, 101, 101, 101, 101, 101, 101, 101, 101,
     101, 101, 101, 101, 101, 101, 101, 116, 116, 116, 116, 116, 116, 100,
     100, 100, 100, 100, 138, 138, 138, 138, 138, 101, 101, 101, 101, 101,
     101, 101, 101, 101, 101, 101, 101, 101, 101, 101, 101, 101, 101, 101, 38,
     38, 38, 38, 38, 38, 38, 38, 3, 3, 3, 3, 3],
    [246, 189, 242, 102, 250, 250, 102, 250, 280, 118, 196, 118, 191, 215,
     121, 121, 49, 49, 49, 49, 49, 49, 49, 49, 49, 49, 49, 49, 171, 171, 171,
     171, 171, 171, 171, 171, 171, 171, 171, 171, 171, 171, 171, 171, 171,
     171, 171, 171, 171, 171, 171, 171, 171, 171, 171, 171, 171, 171, 171,
     171, 171, 171, 161, 161, 161, 161, 161, 161, 161, 161, 14, 14, 14, 14,
     14, 14, 14, 14, 14, 14, 14, 14, 14, 14, 14, 14, 14, 10, 10, 10, 10, 10,
     10, 103, 10, 10, 10, 10, 5],
    [347, 402, 322, 418, 215, 220, 339, 339, 339, 337, 218, 315, 315, 315,
     315, 167, 167, 167, 167, 361, 201, 124, 124, 124, 124, 124, 124, 124,
     124, 124, 124, 124, 231, 231, 90, 90, 90, 90, 90, 90, 90, 90, 90, 90, 90,
     90, 90, 90, 48, 48, 48, 48, 90, 90, 90, 90, 90, 90, 90, 90, 90, 90, 90,
     90, 90, 90, 90, 90, 90, 90, 90, 90, 90, 90, 90, 243, 243, 243, 243, 243,
     243, 243, 243, 243, 243, 283, 283, 283, 283, 283, 283, 283, 283, 283, 16,
     283, 16, 283, 283],
    [505, 220, 601, 644, 612, 160, 206, 206, 206, 422, 134, 518, 134, 134,
     518, 652, 382, 206, 158, 441, 179, 441, 56, 559, 559, 56, 56, 56, 56, 56,
     56, 56, 56, 56, 56, 56, 56, 56, 56, 101, 101, 56, 101, 101, 101, 101,
     101, 101, 101, 101, 193, 193, 193, 193, 193, 193, 193, 101, 101, 101,
     101, 101, 101, 101, 101, 101, 101, 101, 101, 101, 101, 101, 101, 101,
     101, 101, 101, 101, 122, 122, 122, 122, 122, 122, 122, 122, 122, 122,
     122, 122, 122, 122, 122, 122, 122, 101, 101, 101, 101],
    [794, 325, 960, 528, 247, 247, 338, 366, 847, 753, 753, 236, 334, 334,
     461, 711, 652, 381, 381, 381, 652, 381, 381, 381, 381, 381, 381, 381,
     226, 326, 326, 326, 326, 326, 326, 326, 126, 326, 326, 326, 326, 326,
     326, 326, 326, 326, 326, 195, 195, 55, 55, 55, 55, 55, 55, 55, 55, 55,
     55, 55, 55, 55, 55, 55, 55, 55, 55, 55, 195, 195, 195, 195, 195, 195,
     195, 132, 132, 132, 132, 132, 132, 132, 132, 132, 132, 132, 387, 387,
     387, 387, 387, 387, 387, 387, 387, 387, 387, 387, 387],
    [1189, 888, 259, 1082, 725, 811, 636, 965, 497, 497, 1490, 1490, 392,
     1291, 508, 508, 1291, 1291, 508, 1291, 508, 508, 867, 867, 867, 867, 934,
     867, 867, 867, 867, 867, 867, 867, 1284, 1284, 1284, 1284, 1284, 1284,
     1284, 1284, 1284, 563, 563, 563, 563, 1010, 1010, 1010, 208, 838, 563,
     563, 563, 759, 759, 564, 759, 759, 801, 801, 801, 801, 759, 759, 759,
     759, 759, 563, 563, 563, 563, 563, 563, 563, 563, 226, 226, 226, 226,
     226, 226, 226, 226, 226, 226, 226, 226, 226, 226, 226, 226, 226, 226,
     226, 226, 226, 226],
    [1763, 1018, 1500, 432, 1332, 2203, 126, 2240, 1719, 1284, 878, 1983, 266,
     266, 266, 266, 747, 747, 127, 127, 2074, 127, 2074, 1400, 1383, 1383,
     1383, 1383, 1383, 1383, 1383, 1383, 1383, 1383, 1400, 1383, 1383, 1383,
     1383, 1383, 1383, 1383, 507, 1073, 1073, 1073, 1073, 1990, 1990, 1990,
     1990, 1990, 507, 507, 507, 507, 507, 507, 507, 507, 507, 1073, 1073,
     1073, 1073, 1073, 1073, 1073, 1073, 1073, 1073, 1073, 1073, 1073, 1073,
     1073, 1073, 1073, 22, 22, 22, 22, 22, 22, 1073, 452, 452, 452, 452, 452,
     452, 318, 301, 301, 301, 301, 86, 86, 15],
    [2872, 3233, 1534, 2941, 2910, 393, 1796, 919, 446, 919, 919, 1117, 103,
     103, 103, 103, 103, 103, 103, 2311, 3117, 1101, 3117, 3117, 1101, 1101,
     1101, 1101, 1101, 2503, 2503, 2503, 2503, 2503, 2503, 2503, 2503, 429,
     429, 429, 429, 429, 429, 429, 1702, 1702, 1702, 184, 184, 184, 184, 184,
     105, 105, 105, 105, 105, 105, 105, 105, 105, 105, 105, 105, 105, 105,
     105, 105, 105, 105, 105, 105, 105, 105, 105, 105, 105, 105, 105, 105,
     105, 105, 105, 105, 105, 105, 784, 784, 784, 784, 784, 784, 784, 784,
     784, 784, 784, 784, 784],
    [4309, 3758, 4034, 1963, 730, 642, 1502, 2246, 3834, 1511, 1102, 1102,
     1522, 1522, 3427, 3427, 3928, 915, 915, 3818, 3818, 3818, 3818, 4782,
     4782, 4782, 3818, 4782, 3818, 3818, 1327, 1327, 1327, 1327, 1327, 1327,
     1327, 1387, 1387, 1387, 1387, 1387, 1387, 1387, 1387, 1387, 2339, 2339,
     2339, 2339, 2339, 2339, 2339, 2339, 2339, 2339, 2339, 2339, 2339, 3148,
     3148, 3148, 3148, 3148, 3148, 3148, 3148, 3148, 3148, 3148, 3148, 3148,
     3148, 3148, 3148, 3148, 3148, 1776, 1776, 1776, 3354, 3354, 3354, 925,
     3354, 3354, 925, 925, 925, 925, 925, 2133, 2133, 2133, 2133, 2133, 2133,
     2133, 2133],
    [6610, 6977, 1686, 3819, 2314, 5647, 3953, 3614, 5115, 423, 423, 5408,
     7426, 423, 423, 487, 6227, 2660, 6227, 1221, 3811, 197, 4367, 351, 1281,
     1221, 351, 351, 351, 7245, 1984, 2999, 2999, 2999, 2999, 2999, 2999,
     3995, 2063, 2063, 2063, 2063, 1644, 2063, 2077, 2512, 2512, 2512, 2077,
     2077, 2077, 2077, 754, 754, 754, 754, 754, 754, 754, 754, 754, 754, 754,
     754, 754, 754, 754, 754, 754, 754, 754, 1097, 1097, 754, 754, 754, 754,
     248, 754, 1097, 1097, 1097, 1097, 222, 222, 222, 222, 754, 1982, 1982,
     1982, 1982, 1982, 1982, 1982, 1982, 1982, 1982, 1982],
    [9861, 3647, 4073, 2535, 3430, 9865, 2830, 9328, 4320, 5913, 10365, 8272,
     3706, 6186, 7806, 7806, 7806, 8610, 2563, 11558, 11558, 9421, 1181, 9421,
     1181, 1181, 1181, 9421, 1181, 1181, 10574, 10574, 3534, 3534, 3534, 3534,
     3534, 2898, 2898, 2898, 3450, 2141, 2141, 2141, 2141, 2141, 2141, 2141,
     7055, 7055, 7055, 7055, 7055, 7055, 7055, 7055, 7055, 7055, 7055, 7055,
     7055, 7055, 7055, 2831, 8204, 8204, 8204, 8204, 8204, 8204, 8204, 8204,
     8204, 8204, 8204, 8204, 8204, 8204, 8204, 8204, 8204, 8204, 8204, 8204,
     8204, 8204, 8204, 8204, 4688, 4688, 4688, 2831, 2831, 2831, 2831, 2831,
     2831, 2831, 2831],
    [10327, 7582, 7124, 8214, 9600, 10271, 10193, 10800, 9086, 2365, 4409,
     13812, 5661, 9344, 9344, 10362, 9344, 9344, 8585, 11114, 13080, 13080,
     13080, 6949, 3436, 3436, 3436, 13213, 6130, 6130, 8159, 8159, 11595,
     8159, 3436, 7096, 7096, 7096, 7096, 7096, 7096, 7096, 7096, 7096, 7096,
     7096, 7096, 7096, 7096, 7096, 7096, 7096, 7096, 4377, 7096, 4377, 4377,
     4377, 4377, 4377, 5410, 5410, 4377, 4377, 4377, 4377, 4377, 4377, 4377,
     4377, 4377, 4377, 4377, 4377, 4377, 4377, 4377, 4377, 4377, 4377, 4377,
     4377, 4377, 4377, 4377, 4377, 4377, 4377, 4377, 4377, 4377, 4377, 4377,
     4377, 440, 440, 1199, 1199, 1199],
    [19540, 19926, 11582, 11113, 24585, 8726, 17218, 419, 4918, 4918, 4918,
     15701, 17710, 4037, 4037, 15808, 11401, 19398, 25950, 25950, 4454, 24987,
     11719, 8697, 1452, 1452, 1452, 1452, 1452, 8697, 8697, 6436, 21475, 6436,
     22913, 6434, 18497, 11089, 11089, 11089, 11089, 3036, 3036, 14208, 14208,
     14208, 14208, 12906, 12906, 12906, 12906, 12906, 12906, 12906, 12906,
     7614, 7614, 7614, 7614, 5021, 5021, 5021, 5021, 5021, 5021, 10145, 10145,
     10145, 10145, 10145, 10145, 10145, 10145, 10145, 10145, 10145, 10145,
     10145, 10145, 10145, 10145, 10145, 10145, 10145, 10145, 10145, 10145,
     10145, 10145, 4544, 4544, 4544, 4544, 4544, 4544, 8394, 8394, 8394, 8394],
    [34566, 9579, 12654, 26856, 37873, 38806, 29501, 17271, 3663, 10763,
     18955, 1298, 26560, 17132, 17132, 4753, 4753, 8713, 18624, 13082, 6791,
     1122, 19363, 34695, 18770, 18770, 18770, 18770, 15628, 18770, 18770,
     18770, 18770, 33766, 20837, 20837, 20837, 20837, 20837, 20837, 6545,
     6545, 6545, 6545, 6545, 12138, 12138, 12138, 12138, 12138, 12138, 12138,
     12138, 12138, 12138, 12138, 12138, 12138, 12138, 30483, 30483, 30483,
     30483, 30483, 12138, 12138, 12138, 12138, 12138, 12138, 12138, 12138,
     12138, 12138, 12138, 12138, 12138, 12138, 12138, 12138, 12138, 12138,
     12138, 9305, 11107, 11107, 11107, 11107, 11107, 11107, 11107, 11107,
     11107, 11107, 11107, 11107, 11107, 9305, 9305],
    [31929, 49367, 10982, 3527, 27066, 13226, 56010, 18911, 40574, 20767,
     20767, 9686, 47603, 47603, 11736, 11736, 41601, 12888, 32948, 30801,
     44243, 53351, 53351, 16016, 35086, 35086, 32581, 2464, 2464, 49554, 2464,
     2464, 49554, 49554, 2464, 81, 27260, 10681, 2185, 2185, 2185, 2185, 2185,
     2185, 2185, 18086, 18086, 18086, 18086, 18086, 17631, 17631, 18086,
     18086, 18086, 37335, 37774, 37774, 37774, 26401, 26401, 26401, 26401,
     26401, 26401, 26401, 26401, 26401, 26401, 26401, 26401, 26401, 12982,
     40398, 40398, 40398, 40398, 40398, 40398, 3518, 3518, 3518, 37799, 37799,
     37799, 37799, 37799, 37799, 37799, 37799, 37799, 4721, 4721, 4721, 4721,
     7067, 7067, 7067, 7067],
    [40701, 69087, 77576, 64590, 39397, 33179, 10858, 38935, 43129, 35468,
     35468, 5279, 61518, 61518, 27945, 70975, 70975, 86478, 86478, 20514,
     20514, 73178, 73178, 43098, 43098, 4701, 59979, 59979, 58556, 69916,
     15170, 15170, 4832, 4832, 43064, 71685, 4832, 15170, 15170, 15170, 27679,
     27679, 27679, 60826, 60826, 6187, 6187, 4264, 4264, 4264, 4264, 4264,
     45567, 32269, 32269, 32269, 32269, 62060, 62060, 62060, 62060, 62060,
     62060, 62060, 62060, 62060, 1803, 1803, 1803, 1803, 1803, 1803, 1803,
     1803, 1803, 1803, 1803, 1803, 1803, 51108, 51108, 51108, 51108, 51108,
     51108, 51108, 51108, 51108, 51108, 51108, 51108, 55315, 55315, 54140,
     54140, 54140, 54140, 54140, 13134],
    [103650, 125480, 59978, 46875, 77172, 83021, 126904, 14541, 56299, 43636,
     11655, 52680, 88549, 29804, 101894, 113675, 48040, 113675, 34987, 48308,
     97926, 5475, 49449, 6850, 62545, 62545, 9440, 33242, 9440, 33242, 9440,
     33242, 9440, 62850, 9440, 9440, 9440, 90308, 90308, 90308, 47904, 47904,
     47904, 47904, 47904, 47904, 47904, 47904, 47904, 41143, 41143, 41143,
     41143, 41143, 41143, 41143, 36114, 36114, 36114, 36114, 36114, 24997,
     65162, 65162, 65162, 65162, 65162, 65162, 65162, 65162, 65162, 65162,
     65162, 65162, 65162, 65162, 47650, 47650, 47650, 47650, 47650, 47650,
     47650, 40586, 40586, 40586, 40586, 40586, 40586, 40586, 38725, 38725,
     38725, 38725, 88329, 88329, 88329, 88329, 88329],
    [165843, 90647, 59925, 189541, 67647, 74795, 68365, 167485, 143918, 74912,
     167289, 75517, 8148, 172106, 126159, 35867, 35867, 35867, 121694, 52171,
     95354, 113969, 113969, 76304, 123709, 123709, 144615, 123709, 64958,
     64958, 32377, 193002, 193002, 25023, 40017, 141605, 189165, 189165,
     141605, 189165, 189165, 141605, 141605, 141605, 189165, 127047, 127047,
     127047, 127047, 127047, 127047, 127047, 127047, 127047, 127047, 127047,
     127047, 127047, 127047, 127047, 127047, 127047, 127047, 127047, 127047,
     127785, 127785, 127785, 127785, 127785, 127785, 127785, 127785, 127785,
     127785, 80822, 80822, 80822, 80822, 80822, 80822, 131661, 131661, 131661,
     131661, 131661, 131661, 131661, 131661, 131661, 131661, 131661, 131661,
     131661, 131661, 131661, 131661, 7114, 131661],
    [130365, 236711, 110235, 125699, 56483, 93735, 234469, 60549, 1291, 93937,
     245291, 196061, 258647, 162489, 176631, 204895, 73353, 172319, 28881,
     136787, 122081, 122081, 275993, 64673, 211587, 211587, 211587, 282859,
     282859, 211587, 242821, 256865, 256865, 256865, 122203, 291915, 122203,
     291915, 291915, 122203, 25639, 25639, 291803, 245397, 284047, 245397,
     245397, 245397, 245397, 245397, 245397, 245397, 94241, 66575, 66575,
     217673, 217673, 217673, 217673, 217673, 217673, 217673, 217673, 217673,
     217673, 217673, 217673, 217673, 217673, 217673, 217673, 217673, 217673,
     217673, 210249, 210249, 210249, 210249, 210249, 210249, 210249, 210249,
     210249, 210249, 94453, 94453, 94453, 94453, 94453, 94453, 94453, 94453,
     94453, 94453, 94453, 94453, 94453, 94453, 94453],
    [333459, 375354, 102417, 383544, 292630, 41147, 374614, 48032, 435453,
     281493, 358168, 114121, 346892, 238990, 317313, 164158, 35497, 70530,
     70530, 434839, 24754, 24754, 24754, 393656, 118711, 118711, 148227,
     271087, 355831, 91034, 417029, 417029, 91034, 91034, 417029, 91034,
     299843, 299843, 413548, 413548, 308300, 413548, 413548, 413548, 308300,
     308300, 308300, 413548, 308300, 308300, 308300, 308300, 308300, 15311,
     15311, 15311, 15311, 176255, 176255, 23613, 23613, 23613, 23613, 23613,
     23613, 172210, 204328, 204328, 204328, 204328, 121626, 121626, 121626,
     121626, 121626, 200187, 200187, 200187, 200187, 200187, 121551, 121551,
     248492, 248492, 248492, 248492, 248492, 248492, 248492, 248492, 248492,
     248492, 248492, 248492, 13942, 13942, 13942, 13942, 13942],
    [500884, 566009, 399251, 652979, 355008, 430235, 328722, 670680, 405585,
     405585, 424646, 670180, 670180, 641587, 215580, 59048, 633320, 81010,
     20789, 389250, 389250, 638764, 638764, 389250, 389250, 398094, 80846,
     147776, 147776, 296177, 398094, 398094, 147776, 147776, 396313, 578233,
     578233, 578233, 19482, 620706, 187095, 620706, 187095, 126467, 241663,
     241663, 241663, 241663, 241663, 241663, 241663, 241663, 241663, 241663,
     241663, 241663, 321632, 23210, 23210, 394484, 394484, 394484, 78101,
     78101, 78101, 542095, 542095, 542095, 542095, 542095, 542095, 542095,
     542095, 542095, 542095, 542095, 542095, 542095, 542095, 542095, 542095,
     542095, 542095, 542095, 277743, 277743, 277743, 457259, 457259, 457259,
     457259, 457259, 457259, 457259, 457259, 457259, 457259, 457259, 457259],
    [858339, 918142, 501970, 234813, 460565, 31996, 753018, 256150, 199809,
     993599, 245149, 794183, 121349, 150619, 376952, 809123, 809123, 804319,
     67352, 969594, 434796, 969594, 804319, 391368, 761041, 754049, 466264,
     754049, 754049, 466264, 754049, 754049, 282852, 429907, 390017, 276645,
     994856, 250142, 144595, 907454, 689648, 687580, 687580, 687580, 687580,
     978368, 687580, 552742, 105195, 942843, 768249, 307142, 307142, 307142,
     307142, 880619, 880619, 880619, 880619, 880619, 880619, 880619, 117185,
     117185, 117185, 117185, 117185, 117185, 117185, 117185, 117185, 117185,
     117185, 60731, 60731, 60731, 60731, 60731, 60731, 60731, 60731, 60731,
     60731, 60731, 178309, 178309, 178309, 178309, 74373, 74373, 74373, 74373,
     74373, 74373, 74373, 74373, 214965, 214965, 214965],
], dtype=np.int64)
