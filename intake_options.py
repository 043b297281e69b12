# --- Intake Form Vocabulary ---
# Values shown by the intake form; submissions store them verbatim.

CUSTOMER_TYPE_NEW = '新規'
CUSTOMER_TYPE_RETURNING = '再来店'
CUSTOMER_TYPES = [CUSTOMER_TYPE_NEW, CUSTOMER_TYPE_RETURNING]

REPEAT_CHANNEL_LABEL = 'リピート（2回目以降の来店は全員こちら）'
CHANNELS = [
    REPEAT_CHANNEL_LABEL,
    '看板',
    'インスタグラム',
    'ツイッター',
    'TikTok',
    'Google Map',
    'Google 検索',
    'ホットペッパー',
    'チラシ',
    'YouTube',
    'お客様からの紹介',
    'スタッフからの紹介',
    '林社長きっかけ',
    '癒しタイムズ',
    'Yahoo検索',
    'Facebook',
    'ふるさと納税',
    'その他',
]
CHANNELS_FOR_NEW = [option for option in CHANNELS if option != REPEAT_CHANNEL_LABEL]

VISIT_COUNTS = ['2回目', '3回目', '4回目以降']

NEXT_RESERVATION_OPTIONS = ['あり', 'なし']

TICKET_OPTIONS = [
    'なし',
    '利用',
    '60×3購入',
    '60×5購入',
    '90×3購入',
    '90×5購入',
    '120×3購入',
    '120×5購入',
    '150×3購入',
    '150×5購入',
    'その他',
]

PRACTITIONERS = ['すず', 'ある', 'さよこ', 'みき', 'さつき', 'みう']

GENDER_OPTIONS = ['男性', '女性']

COMPENSATION_FIXED = 'fixed'
COMPENSATION_COMMISSION = 'commission'


def form_context():
    """Option lists handed to the intake template."""
    return {
        'customer_types': CUSTOMER_TYPES,
        'channels_for_new': CHANNELS_FOR_NEW,
        'repeat_channel': REPEAT_CHANNEL_LABEL,
        'visit_counts': VISIT_COUNTS,
        'next_reservation_options': NEXT_RESERVATION_OPTIONS,
        'ticket_options': TICKET_OPTIONS,
        'practitioners': PRACTITIONERS,
        'gender_options': GENDER_OPTIONS,
    }
