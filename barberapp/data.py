# barberapp/data.py

DEFAULT_TIME_SLOTS = [
    "08:00", "08:30", "09:00", "09:30", "10:00", "10:30",
    "11:00", "11:30", "14:00", "14:30", "15:00", "15:30",
    "16:00", "16:30", "17:00", "17:30", "18:00",
]

POPUP_COOKIE = "banner_popup_shown"

NOTIFICATION_TEMPLATE = (
    "🔔 NOVO AGENDAMENTO!\n\n"
    "👤 Cliente: {name}\n"
    "📞 Telefone: {phone}\n"
    "✂️ Serviço: {service}\n"
    "💰 Preço: R$ {price:.2f}\n"
    "📅 Data: {date}\n"
    "⏰ Horário: {time}"
)
