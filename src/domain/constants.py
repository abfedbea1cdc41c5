"""Domain constants for receivable aging and order labels."""

from src.domain.models.enums import (
    AchievementUnit,
    ClientType,
    OrderStatus,
    OrderType,
    OverdueLevel,
    PaymentStatus,
    TransportType,
)

# Inclusive upper bound of each band, in days past due.
OVERDUE_LEVEL_THRESHOLDS = (
    (60, OverdueLevel.NORMAL),
    (90, OverdueLevel.WARNING),
    (180, OverdueLevel.LONGTERM),
)
MOST_SEVERE_OVERDUE_LEVEL = OverdueLevel.BAD

MISSING_LABEL = "정보 없음"

OVERDUE_LEVEL_LABELS = {
    OverdueLevel.NORMAL: "정상",
    OverdueLevel.WARNING: "주의",
    OverdueLevel.LONGTERM: "장기",
    OverdueLevel.BAD: "부실",
}

OVERDUE_LEVEL_DESCRIPTIONS = {
    OverdueLevel.NORMAL: "60일 이내 연체",
    OverdueLevel.WARNING: "61-90일 연체",
    OverdueLevel.LONGTERM: "91-180일 연체",
    OverdueLevel.BAD: "181일 이상 연체",
}

PAYMENT_STATUS_LABELS = {
    PaymentStatus.UNPAID: "미수",
    PaymentStatus.PARTIAL: "부분수금",
    PaymentStatus.PAID: "완료",
    PaymentStatus.OVERDUE: "연체",
}

CLIENT_TYPE_LABELS = {
    ClientType.GOVERNMENT: "관수",
    ClientType.PRIVATE: "민수",
}

ORDER_TYPE_LABELS = {
    OrderType.NEW: "신규",
    OrderType.CHANGE1: "1차 변경",
    OrderType.CHANGE2: "2차 변경",
    OrderType.CHANGE3: "3차 변경",
    OrderType.CHANGE4: "4차 변경",
    OrderType.CHANGE5: "5차 변경",
}
NEW_WITH_CHANGES_LABEL = "신규+변경"

ORDER_STATUS_LABELS = {
    OrderStatus.BIDDING: "입찰예정",
    OrderStatus.CONTRACTED: "계약",
    OrderStatus.IN_PROGRESS: "진행중",
    OrderStatus.COMPLETED: "완료",
}

TRANSPORT_TYPE_LABELS = {
    TransportType.ONSITE: "부지내",
    TransportType.TRANSPORT: "반출",
}

ACHIEVEMENT_UNIT_LABELS = {
    AchievementUnit.TON: "Ton",
    AchievementUnit.CUBIC_METER: "㎥",
    AchievementUnit.UNIT: "대",
    AchievementUnit.NONE: "-",
}

CONTAMINATION_SUBSTANCE_GROUPS = {
    "중금속류": (
        "카드뮴", "구리", "비소", "수은", "납", "6가크롬", "아연", "니켈",
    ),
    "유류": ("TPH", "벤젠", "톨루엔", "에틸벤젠", "크실렌", "벤조(a)피렌"),
    "염소계용매": ("TCE", "PCE", "1,2-디클로로에탄"),
    "유기염소화합물": ("폴리클로리네이티드비페닐", "PCB", "다이옥신"),
    "기타유기물": ("유기인화합물", "페놀"),
    "기타무기물": ("불소", "시안"),
}


__all__ = [
    "OVERDUE_LEVEL_THRESHOLDS",
    "MOST_SEVERE_OVERDUE_LEVEL",
    "MISSING_LABEL",
    "OVERDUE_LEVEL_LABELS",
    "OVERDUE_LEVEL_DESCRIPTIONS",
    "PAYMENT_STATUS_LABELS",
    "CLIENT_TYPE_LABELS",
    "ORDER_TYPE_LABELS",
    "NEW_WITH_CHANGES_LABEL",
    "ORDER_STATUS_LABELS",
    "TRANSPORT_TYPE_LABELS",
    "ACHIEVEMENT_UNIT_LABELS",
    "CONTAMINATION_SUBSTANCE_GROUPS",
]
