# Версия формата JSON-отчёта; повышается при несовместимых изменениях
PROTOCOL_VERSION = 1
