"""Example sequences substituted when a list field is absent or empty."""

from __future__ import annotations

PLACEHOLDER_IMAGE = "https://placehold.co/600x300?text=Image"
PLACEHOLDER_THUMB = "https://placehold.co/180x120?text=Image"
PLACEHOLDER_VIDEO = "https://placehold.co/600x338?text=Video"

STATS_ITEMS = (
    {"value": "10K+", "label": "Клиентов"},
    {"value": "98%", "label": "Довольных"},
    {"value": "24/7", "label": "Поддержка"},
)

FAQ_ITEMS = (
    {"question": "Как оформить заказ?", "answer": "Выберите товар и нажмите «Купить»."},
    {"question": "Сколько стоит доставка?", "answer": "Доставка бесплатна от 3000 ₽."},
    {"question": "Можно ли вернуть товар?", "answer": "Да, в течение 14 дней."},
)

GALLERY_IMAGES = (
    "https://placehold.co/180x120?text=1",
    "https://placehold.co/180x120?text=2",
    "https://placehold.co/180x120?text=3",
)

FEATURE_ITEMS = (
    {"icon": "⚡", "title": "Быстро", "text": "Запуск за 5 минут"},
    {"icon": "🔒", "title": "Надёжно", "text": "Данные под защитой"},
    {"icon": "💬", "title": "Поддержка", "text": "Ответим в любое время"},
)

PRICING_ITEMS = (
    {
        "name": "Базовый",
        "price": "990 ₽",
        "period": "/мес",
        "features": ["1 проект", "Email-поддержка"],
        "button_text": "Выбрать",
    },
    {
        "name": "Pro",
        "price": "2 990 ₽",
        "period": "/мес",
        "features": ["10 проектов", "Приоритетная поддержка", "Аналитика"],
        "button_text": "Выбрать",
    },
    {
        "name": "Бизнес",
        "price": "9 990 ₽",
        "period": "/мес",
        "features": ["Без ограничений", "Персональный менеджер", "API"],
        "button_text": "Выбрать",
    },
)

FORM_FIELDS = ("Имя", "Email", "Сообщение")

LIST_ITEMS = ("Первый пункт", "Второй пункт", "Третий пункт")

SURVEY_OPTIONS = ("Отлично", "Хорошо", "Плохо")

FOOTER_LINKS = (
    {"label": "Сайт", "url": "#"},
    {"label": "Поддержка", "url": "#"},
)

STEP_ITEMS = (
    {"title": "Регистрация", "text": "Создайте аккаунт за минуту"},
    {"title": "Настройка", "text": "Выберите шаблон и цвета"},
    {"title": "Запуск", "text": "Отправьте первое письмо"},
)

CARD_ITEMS = (
    {"image": PLACEHOLDER_THUMB, "title": "Карточка 1", "text": "Короткое описание", "url": "#"},
    {"image": PLACEHOLDER_THUMB, "title": "Карточка 2", "text": "Короткое описание", "url": "#"},
    {"image": PLACEHOLDER_THUMB, "title": "Карточка 3", "text": "Короткое описание", "url": "#"},
)

TESTIMONIAL_ITEMS = (
    {"text": "Отличный сервис, рекомендую всем!", "author": "Анна", "role": "Маркетолог"},
    {"text": "Письма собираются за пару минут.", "author": "Игорь", "role": "Основатель"},
)

SOCIAL_LINKS = (
    {"network": "Telegram", "url": "https://t.me/"},
    {"network": "VK", "url": "https://vk.com/"},
    {"network": "YouTube", "url": "https://youtube.com/"},
)
