"""
Fixed lookup tables for both engines.

These are frozen data. The bigram tables were drawn once from a random
permutation of 0..675 and cannot be recomputed from a formula; existing
ciphertexts depend on them entry for entry. See sbox_tools for the
offline generators.
"""

from .arithmetic import (
    ALPHABET_SIZE,
    IDENTITY_MATRIX,
    gf_add,
    gf_mul,
    matrix_product,
    mod_add,
    mod_mul,
)

# ===========================================================================
# Byte engine
# ===========================================================================

# Rijndael S-box (GF(2^8) inverse followed by the affine transform)
SBOX = bytes([
    0x63, 0x7c, 0x77, 0x7b, 0xf2, 0x6b, 0x6f, 0xc5, 0x30, 0x01, 0x67, 0x2b, 0xfe, 0xd7, 0xab, 0x76,
    0xca, 0x82, 0xc9, 0x7d, 0xfa, 0x59, 0x47, 0xf0, 0xad, 0xd4, 0xa2, 0xaf, 0x9c, 0xa4, 0x72, 0xc0,
    0xb7, 0xfd, 0x93, 0x26, 0x36, 0x3f, 0xf7, 0xcc, 0x34, 0xa5, 0xe5, 0xf1, 0x71, 0xd8, 0x31, 0x15,
    0x04, 0xc7, 0x23, 0xc3, 0x18, 0x96, 0x05, 0x9a, 0x07, 0x12, 0x80, 0xe2, 0xeb, 0x27, 0xb2, 0x75,
    0x09, 0x83, 0x2c, 0x1a, 0x1b, 0x6e, 0x5a, 0xa0, 0x52, 0x3b, 0xd6, 0xb3, 0x29, 0xe3, 0x2f, 0x84,
    0x53, 0xd1, 0x00, 0xed, 0x20, 0xfc, 0xb1, 0x5b, 0x6a, 0xcb, 0xbe, 0x39, 0x4a, 0x4c, 0x58, 0xcf,
    0xd0, 0xef, 0xaa, 0xfb, 0x43, 0x4d, 0x33, 0x85, 0x45, 0xf9, 0x02, 0x7f, 0x50, 0x3c, 0x9f, 0xa8,
    0x51, 0xa3, 0x40, 0x8f, 0x92, 0x9d, 0x38, 0xf5, 0xbc, 0xb6, 0xda, 0x21, 0x10, 0xff, 0xf3, 0xd2,
    0xcd, 0x0c, 0x13, 0xec, 0x5f, 0x97, 0x44, 0x17, 0xc4, 0xa7, 0x7e, 0x3d, 0x64, 0x5d, 0x19, 0x73,
    0x60, 0x81, 0x4f, 0xdc, 0x22, 0x2a, 0x90, 0x88, 0x46, 0xee, 0xb8, 0x14, 0xde, 0x5e, 0x0b, 0xdb,
    0xe0, 0x32, 0x3a, 0x0a, 0x49, 0x06, 0x24, 0x5c, 0xc2, 0xd3, 0xac, 0x62, 0x91, 0x95, 0xe4, 0x79,
    0xe7, 0xc8, 0x37, 0x6d, 0x8d, 0xd5, 0x4e, 0xa9, 0x6c, 0x56, 0xf4, 0xea, 0x65, 0x7a, 0xae, 0x08,
    0xba, 0x78, 0x25, 0x2e, 0x1c, 0xa6, 0xb4, 0xc6, 0xe8, 0xdd, 0x74, 0x1f, 0x4b, 0xbd, 0x8b, 0x8a,
    0x70, 0x3e, 0xb5, 0x66, 0x48, 0x03, 0xf6, 0x0e, 0x61, 0x35, 0x57, 0xb9, 0x86, 0xc1, 0x1d, 0x9e,
    0xe1, 0xf8, 0x98, 0x11, 0x69, 0xd9, 0x8e, 0x94, 0x9b, 0x1e, 0x87, 0xe9, 0xce, 0x55, 0x28, 0xdf,
    0x8c, 0xa1, 0x89, 0x0d, 0xbf, 0xe6, 0x42, 0x68, 0x41, 0x99, 0x2d, 0x0f, 0xb0, 0x54, 0xbb, 0x16,
])

INV_SBOX = bytes(SBOX.index(i) for i in range(256))

# Rijndael MixColumns matrix and its inverse, column-major.
# Row view:            Inverse row view:
#   02 03 01 01          0e 0b 0d 09
#   01 02 03 01          09 0e 0b 0d
#   01 01 02 03          0d 09 0e 0b
#   03 01 01 02          0b 0d 09 0e
MIX_MATRIX = (
    0x02, 0x01, 0x01, 0x03,
    0x03, 0x02, 0x01, 0x01,
    0x01, 0x03, 0x02, 0x01,
    0x01, 0x01, 0x03, 0x02,
)

INV_MIX_MATRIX = (
    0x0e, 0x09, 0x0d, 0x0b,
    0x0b, 0x0e, 0x09, 0x0d,
    0x0d, 0x0b, 0x0e, 0x09,
    0x09, 0x0d, 0x0b, 0x0e,
)


# ===========================================================================
# Text engine
# ===========================================================================

# A=0, B=1, ..., Z=25. Changing the alphabet invalidates the bigram
# tables and the Hill matrices below.
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Bigram S-box: (a, b) -> BIGRAM_SBOX[a*26 + b] = v -> (v // 26, v % 26)
BIGRAM_SBOX = (
     19, 534, 428, 602, 545, 271, 675, 490,  14, 606, 471, 621, 637,
    234, 414, 299, 180, 669, 221, 127, 636, 371, 482,  34, 648, 487,
    440, 336, 508, 472, 370,  69, 563, 105, 114, 656, 539, 311, 661,
    259,  48, 530, 660, 150, 202, 181, 191, 139, 627, 231, 655, 323,
    214, 164,  52, 642, 349, 535, 320, 128, 448, 454, 625, 501, 145,
    222, 338, 102, 445, 667, 168,  84, 142, 555,  75, 546, 481, 646,
    594, 213, 192,  92, 162, 495,  79, 367, 601,  16, 499, 518, 671,
    613,  94, 528,  64, 407, 289, 657, 189, 592, 558, 233, 398, 649,
    268, 266, 474, 381, 303, 511, 264, 172,  54, 479, 163, 569, 504,
    658,  91, 295, 196, 122, 347, 104,  24, 316, 375, 260, 182, 600,
    252, 106, 604,  18, 515, 135, 157, 281, 622, 548, 588,  71, 470,
    411, 331, 599,  28, 350,  73, 346, 496, 255, 304, 136, 580, 126,
     99, 633, 146, 251,  87, 537, 639, 452, 361, 653,  95, 390, 169,
    460, 582, 373, 360, 185, 166, 348, 368, 246, 227,  20, 590,  86,
    467, 207, 378, 219,  98, 125, 629, 355, 391, 570, 244, 449, 170,
    549, 240, 206, 193, 359, 210, 177, 663, 547, 220, 248, 129, 195,
    261, 670, 280, 276,  41, 394, 208,  90, 556, 258,  80, 282, 573,
    560, 620, 319, 632,  83, 292, 559, 587, 116, 332, 364, 132, 302,
    575, 513, 212, 584, 245,  30, 334, 353, 115, 526, 585, 198,  81,
    458, 269, 461, 120, 579, 450, 437,  50, 451, 298, 309, 345, 341,
    328, 242,  26,   8, 117, 645, 243, 293,  31, 567, 538, 497, 176,
    507, 553, 229,  23, 286, 429,  56, 533, 226, 322,  60, 357, 400,
     25, 138, 647,  45,   7, 611, 469, 510,   2, 595, 294, 167, 641,
    541, 358,  65, 576, 477,  62, 517, 211, 593,   6, 431, 134, 354,
     96, 532, 313, 197, 287,  29, 343, 608, 425, 296, 239, 557, 404,
    199, 388, 422, 160, 230, 275, 443, 652, 369, 492, 610, 509, 254,
    616,  43, 640, 310, 137, 188,  93, 224, 317, 638, 284, 173, 238,
    290,  27,  39, 175,  78,  36, 152, 659, 183, 418, 352, 473, 484,
    200, 257,  77,  82, 416, 300,  44, 551, 536, 525, 617, 419,  53,
    318, 512, 237, 384, 111, 119, 483,  46, 148, 589, 335, 506, 421,
    498, 397, 133, 396, 315, 118,  88, 550, 156, 438, 485, 634, 235,
     51, 201, 514, 522, 596, 424, 253, 505, 329, 430, 141, 305, 392,
    612, 615, 403, 395, 565, 204, 110, 527, 475, 263, 165,  55, 415,
    426, 402, 383, 278, 586, 420, 457, 568, 256, 441, 628, 609, 324,
    154, 171, 184, 283, 465, 666, 159, 476, 130,  70, 597, 462, 520,
    109, 480, 374, 326, 650, 668, 247,  15, 151, 572,  74, 651,  66,
     32,  42, 654, 265, 624, 186, 491, 399, 344, 674, 339, 493, 578,
    571, 488, 502, 153, 455,  22, 552, 321,  17, 466, 463,  72, 312,
    236, 618, 519,  35, 272,  61, 144,  10,   0,   9, 673, 306, 529,
    623, 643, 500, 140, 598, 389, 442, 447, 187, 432, 314, 591, 581,
    147, 377,  85,  37, 544, 250,  89, 521, 459,  47, 542, 635,   4,
    249, 273, 386, 342, 270, 554, 385, 262, 178, 435, 446,  58,  33,
    228, 174, 340, 190, 664, 218,  38, 307, 619, 444, 413, 356, 291,
    209, 179, 325, 564, 566, 453, 216, 516, 100, 101, 279, 405, 131,
      1, 267,  59, 503, 301, 523, 410, 366, 494, 285, 330, 626,   3,
    365, 223, 540, 379, 406, 124, 205, 433, 362, 665, 351, 121, 194,
    644, 489, 417, 161, 486, 113,  12, 241,  11, 274, 288, 143, 297,
    583, 603, 155, 605, 308, 103, 631, 149, 327, 123, 376, 277, 614,
    423, 456, 393,  13, 577, 363,  68,   5, 543, 439, 562, 531, 630,
    468, 436, 158,  97, 372, 337,  57, 434, 574,  49, 232, 409,  63,
    108, 203, 217, 382, 333, 380,  67, 524, 607, 464, 427, 112,  21,
    662, 672, 107, 561,  40, 408, 412, 401, 225, 215, 387,  76, 478,
)

BIGRAM_SBOX_INV = (
    502, 572, 294, 584, 532, 631, 308, 290, 263, 503, 501, 606, 604,
    627,   8, 462,  87, 489, 133,   0, 179, 662, 486, 276, 124, 286,
    262, 352, 146, 317, 239, 268, 468, 545,  23, 497, 356, 523, 552,
    353, 667, 212, 469, 339, 370, 289, 384, 529,  40, 646, 254, 403,
     54, 376, 112, 427, 279, 643, 544, 574, 283, 499, 304, 649,  94,
    301, 467, 656, 630,  31, 451, 141, 492, 148, 465,  74, 674, 366,
    355,  84, 218, 246, 367, 225,  71, 522, 181, 160, 396, 526, 215,
    118,  81, 344,  92, 166, 312, 640, 186, 156, 567, 568,  67, 616,
    123,  33, 131, 665, 650, 455, 422, 381, 661, 603,  34, 242, 229,
    264, 395, 382, 250, 596, 121, 620, 590, 187, 155,  19,  59, 206,
    450, 571, 232, 392, 310, 135, 153, 342, 287,  47, 510, 413,  72,
    609, 500,  64, 158, 520, 385, 618,  43, 463, 357, 484, 442, 613,
    398, 136, 639, 448, 328, 601,  82, 114,  53, 426, 174, 297,  70,
    168, 194, 443, 111, 349, 547, 354, 272, 201, 541, 560,  16,  45,
    128, 359, 444, 173, 473, 515, 343,  98, 549,  46,  80, 198, 597,
    207, 120, 315, 245, 325, 364, 404,  44, 651, 421, 591, 197, 183,
    214, 559, 200, 306, 236,  79,  52, 672, 565, 652, 551, 185, 204,
     18,  65, 586, 345, 671, 281, 178, 546, 275, 329,  49, 647, 101,
     13, 402, 494, 379, 350, 322, 196, 605, 261, 266, 192, 238, 177,
    461, 205, 533, 525, 159, 130, 409, 337, 151, 437, 365, 217,  39,
    127, 208, 540, 425, 110, 471, 105, 573, 104, 248, 537,   5, 498,
    534, 607, 330, 211, 622, 432, 569, 210, 137, 219, 445, 348, 581,
    277, 316, 608,  96, 351, 558, 226, 267, 296, 119, 321, 610, 256,
     15, 369, 576, 233, 108, 152, 414, 505, 553, 615, 257, 341,  37,
    493, 314, 517, 394, 125, 346, 377, 223,  58, 488, 282,  51, 441,
    561, 458, 619, 260, 411, 582, 144, 230, 654, 240, 387,  27, 642,
     66, 478, 548, 259, 536, 318, 476, 258, 149, 122, 175,  56, 147,
    595, 361, 241, 311, 189, 557, 284, 300, 199, 172, 164, 593, 629,
    231, 585, 579,  85, 176, 333,  30,  21, 641, 171, 457, 126, 621,
    521, 184, 588, 655, 107, 653, 431, 380, 539, 535, 673, 326, 512,
    167, 190, 415, 626, 213, 419, 393, 391, 102, 475, 285, 670, 430,
    418, 324, 570, 589,  95, 668, 648, 578, 143, 669, 556,  14, 428,
    368, 600, 360, 375, 434, 389, 327, 624, 408, 320, 429, 660,   2,
    278, 412, 309, 516, 592, 644, 542, 638, 253, 399, 633,  26, 438,
    513, 331, 555,  68, 543, 514,  60, 193, 252, 255, 163, 564,  61,
    485, 625, 435, 247, 528, 169, 249, 453, 491, 659, 446, 490, 182,
    637, 292, 142,  10,  29, 362, 106, 424, 449, 303, 675, 113, 456,
     76,  22, 383, 363, 400, 602,  25, 482, 599,   7, 474, 334, 479,
    580,  83, 150, 271, 390,  88, 509,  63, 483, 575, 116, 410, 388,
    273,  28, 336, 293, 109, 378, 235, 405, 134, 566, 305,  89, 496,
    454, 527, 406, 577, 657, 373, 243, 423,  93, 506,  41, 635, 313,
    280,   1,  57, 372, 161, 270,  36, 587, 299, 530, 632, 524,   4,
     75, 203, 139, 195, 397, 371, 487, 274, 538,  73, 216, 323, 100,
    227, 221, 666, 634,  32, 562, 420, 563, 269, 436, 115, 191, 481,
    464, 220, 645, 234, 302, 628, 480, 251, 154, 519, 170, 611, 237,
    244, 433, 228, 140, 386, 180, 518,  99, 307,  78, 295, 407, 452,
    511, 145, 129,  86,   3, 612, 132, 614,   9, 658, 319, 440, 335,
    291, 416,  91, 623, 417, 338, 374, 495, 554, 222,  11, 138, 507,
    472,  62, 583,  48, 439, 188, 636, 617, 224, 157, 401, 531,  20,
     12, 347, 162, 340, 298,  55, 508, 598, 265,  77, 288,  24, 103,
    459, 466, 332, 165, 470,  50,  35,  97, 117, 358,  42,  38, 663,
    202, 550, 594, 447,  69, 460,  17, 209,  90, 664, 504, 477,   6,
)

# Hill-cipher matrices mod 26, column-major like the state.
HILL_MATRIX = (
    2, 3, 1, 1,
    1, 2, 3, 1,
    1, 1, 2, 3,
    3, 1, 1, 2,
)

HILL_MATRIX_INV = (
    14,  9, 19, 25,
    25, 14,  9, 19,
    19, 25, 14,  9,
     9, 19, 25, 14,
)


def _check_permutation_pair(forward, inverse, size: int, name: str) -> None:
    if len(forward) != size or len(inverse) != size:
        raise RuntimeError(f"{name} must have {size} entries")
    if sorted(forward) != list(range(size)):
        raise RuntimeError(f"{name} is not a permutation of 0..{size - 1}")
    for x in range(size):
        if inverse[forward[x]] != x:
            raise RuntimeError(f"{name} inverse mismatch at {x}")


def _check_matrix_pair(forward, inverse, add, mul, name: str) -> None:
    if matrix_product(forward, inverse, add, mul) != IDENTITY_MATRIX:
        raise RuntimeError(f"{name} and its inverse do not multiply to identity")


_check_permutation_pair(SBOX, INV_SBOX, 256, "SBOX")
_check_permutation_pair(
    BIGRAM_SBOX, BIGRAM_SBOX_INV, ALPHABET_SIZE * ALPHABET_SIZE, "BIGRAM_SBOX"
)
_check_matrix_pair(MIX_MATRIX, INV_MIX_MATRIX, gf_add, gf_mul, "MIX_MATRIX")
_check_matrix_pair(HILL_MATRIX, HILL_MATRIX_INV, mod_add, mod_mul, "HILL_MATRIX")
