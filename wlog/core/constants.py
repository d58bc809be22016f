"""Static rule tables, keyword lists and mappings for wlog."""

from __future__ import annotations

# Ordered (pattern, replacement) pairs. Each rule is applied globally to the
# output of the previous one, so order is part of the contract.
NORMALIZATION_RULES = [
    # Sports
    (r"스노우\s*보드|스노\s*보딩|보드\s*타기|보딩", "스노보드"),
    # Weight training
    (r"사레레|사례를|사레", "사이드 레터럴 레이즈"),
    (r"데드\s*버그|데드북", "데드버그"),
    (r"천국의\s*계단", "스텝밀"),
    (r"랫\s*풀다운|랫풀", "랫풀다운"),
    (r"푸쉬업|팔굽혀", "푸시업"),
    (r"플랭크", "플랭크"),
    # Local addition; its output is collapsed by the side plank rule below.
    (r"옆구리\s*플랭크|옆\s*플랭크", "사이드 플랭크"),
    (r"사이드\s*플랭크|사플", "사이드플랭크"),
    (r"카프(\s*레이즈)?", "카프레이즈"),
    (r"로우|로잉", "로우"),
    (r"런닝|러닝", "러닝"),
    # Intensity / style
    (r"빡세게|하드하게|빡시게", "빡세게"),
    (r"가볍게|라이트하게|여유롭게", "가볍게"),
]

KNOWN_EXERCISES = [
    # Sports
    "스노보드",
    "러닝",
    # Strength
    "사이드 레터럴 레이즈",
    "데드버그",
    "스텝밀",
    "랫풀다운",
    "푸시업",
    "플랭크",
    "사이드플랭크",
    "카프레이즈",
    "로우",
    "벤치프레스",
    "스쿼트",
    "데드리프트",
    "풀업",
    "친업",
    "덤벨컬",
    "트라이셉스",
    "레그프레스",
    "레그컬",
    "레그익스텐션",
    "숄더프레스",
    # Cardio / functional
    "버피",
    "마운틴클라이머",
    "점핑잭",
]

# Adverbs dropped when recovering a residual exercise name.
INTENSITY_ADVERBS = ["빡세게", "가볍게", "천천히", "빠르게", "힘들게", "살살"]

# Scanned in order when a segment has no parenthesized note.
NOTE_KEYWORDS = [
    "빡세게",
    "가볍게",
    "천천히",
    "빠르게",
    "힘들게",
    "살살",
    "고강도",
    "저강도",
    "인터벌",
    "드롭세트",
    "슈퍼세트",
    "실패지점까지",
    "맨몸",
]

# Axis 1: where the workout happened. Checked in order, default "gym".
CATEGORY_RULES = [
    ("snowboard", ["스노보드", "스키", "보드", "snowboard", "ski"]),
    ("running", ["러닝", "조깅", "달리기", "마라톤", "야외러닝", "running", "jogging"]),
    (
        "sports",
        ["축구", "농구", "야구", "테니스", "배드민턴", "골프", "탁구", "볼링", "클라이밍", "수영", "풋살"],
    ),
    ("home", ["홈트", "집에서", "홈트레이닝", "맨몸"]),
]
DEFAULT_CATEGORY = "gym"

# Axis 2: what kind of training. Checked in order, then the known exercise
# registry (strength), then "unknown".
TYPE_RULES = [
    (
        "skill",
        [
            "스노보드",
            "스키",
            "트릭",
            "골프",
            "클라이밍",
            "테니스",
            "배드민턴",
            "탁구",
            "볼링",
            "snowboard",
            "ski",
            "trick",
        ],
    ),
    (
        "cardio",
        [
            "러닝",
            "조깅",
            "달리기",
            "마라톤",
            "트레드밀",
            "스텝밀",
            "사이클",
            "자전거",
            "스피닝",
            "로잉",
            "수영",
            "줄넘기",
            "걷기",
            "워킹",
            "등산",
            "엘립티컬",
            "점핑잭",
            "마운틴클라이머",
            "축구",
            "농구",
            "running",
            "treadmill",
            "cycle",
            "bike",
            "rowing",
            "swimming",
            "walking",
        ],
    ),
    ("flexibility", ["스트레칭", "요가", "폼롤링", "필라테스", "스트레치", "stretching", "yoga"]),
    (
        "strength",
        [
            "프레스",
            "벤치",
            "스쿼트",
            "런지",
            "데드",
            "레이즈",
            "풀업",
            "친업",
            "딥스",
            "푸시업",
            "플랭크",
            "크런치",
            "익스텐션",
            "덤벨",
            "바벨",
            "케틀벨",
            "머신",
            "웨이트",
        ],
    ),
]
DEFAULT_TYPE = "unknown"

# Level 3: body region, only for strength workouts. Checked in order.
TARGET_RULES = [
    (
        "core",
        ["플랭크", "데드버그", "크런치", "레그레이즈", "사이드플랭크", "싯업", "윗몸", "복근", "코어", "plank", "crunch", "core"],
    ),
    (
        "upper",
        [
            "벤치",
            "숄더프레스",
            "오버헤드",
            "체스트",
            "푸시업",
            "풀업",
            "친업",
            "랫풀다운",
            "로우",
            "덤벨컬",
            "바벨컬",
            "해머컬",
            "트라이셉스",
            "딥스",
            "레터럴",
            "가슴",
            "어깨",
            "이두",
            "삼두",
            "bench",
            "shoulder",
            "chest",
        ],
    ),
    (
        "lower",
        [
            "스쿼트",
            "런지",
            "데드리프트",
            "레그프레스",
            "레그컬",
            "레그익스텐션",
            "카프레이즈",
            "힙쓰러스트",
            "브릿지",
            "하체",
            "squat",
            "lunge",
            "deadlift",
            "leg",
        ],
    ),
    ("full", ["버피", "클린", "스내치", "케틀벨", "쓰러스터", "전신", "burpee", "clean", "snatch", "kettlebell"]),
]
DEFAULT_TARGET = "none"

# Cardio fairness weighting, used only at aggregation time.
CARDIO_MULTIPLIERS = {
    "running": 1.0,
    "stepmill": 1.0,
    "rowing": 0.6,
    "cycle": 0.4,
    "other": 0.3,
}

CARDIO_KEYWORDS = {
    "running": [
        "러닝",
        "트레드밀",
        "달리기",
        "조깅",
        "마라톤",
        "야외러닝",
        "런닝",
        "뛰기",
        "running",
        "treadmill",
        "jogging",
    ],
    "stepmill": [
        "천국의계단",
        "스텝밀",
        "마이마운틴",
        "등산",
        "스테퍼",
        "계단",
        "스텝머신",
        "stepmill",
        "stairmaster",
        "stepper",
    ],
    "rowing": ["로잉", "로잉머신", "조정", "노젓기", "rowing", "rower"],
    "cycle": ["사이클", "실내자전거", "따릉이", "스피닝", "바이크", "자전거", "cycle", "bike", "spinning"],
    "other": ["엘립티컬", "줄넘기", "수영", "워킹", "걷기", "elliptical", "swimming", "walking"],
}
DEFAULT_CARDIO_CATEGORY = "other"

CARDIO_ICONS = {
    "running": "🏃",
    "stepmill": "🪜",
    "rowing": "🚣",
    "cycle": "🚴",
    "other": "💨",
}

CARDIO_CATEGORY_LABELS = {
    "running": "러닝",
    "stepmill": "스텝밀",
    "rowing": "로잉",
    "cycle": "사이클",
    "other": "기타 유산소",
}

# Flat-equivalent distance tuning.
INCLINE_LOAD_PER_PERCENT = 0.1
RESISTANCE_LOAD_PER_LEVEL = 0.05
DEFAULT_CARDIO_SPEED_KPH = 10.0

TYPE_LABELS = {
    "strength": "근력",
    "cardio": "유산소",
    "flexibility": "유연성",
    "skill": "스킬",
    "unknown": "기타",
}

CATEGORY_LABELS = {
    "gym": "헬스장",
    "snowboard": "스노보드",
    "running": "러닝",
    "sports": "스포츠",
    "home": "홈트",
}

GROUP_BY_CHOICES = ("week", "month", "day")
OUTPUT_FORMAT_CHOICES = ("table", "json")
