from datetime import UTC, datetime

from transmap import Mapper


class Window(Mapper):
    @staticmethod
    def epoch_to_datetime(milliseconds: int | None) -> datetime | None:
        if milliseconds is None:
            return None
        return datetime.fromtimestamp(milliseconds // 1000, tz=UTC)

    @staticmethod
    def datetime_to_epoch(value: datetime | None) -> int | None:
        if value is None:
            return None
        return int(value.timestamp()) * 1000


_ = Window.simple_map(id="windowId", is_exclusive="exclusive", is_perpetual="perpetual")
_ = Window.transform_map("start_on", "epochStart", to="datetime_to_epoch", from_="epoch_to_datetime")
_ = Window.transform_map("end_on", "epochEnd", to="datetime_to_epoch", from_="epoch_to_datetime")

window = Window.from_record(
    {"windowId": 1, "exclusive": True, "perpetual": False, "epochStart": 1516499650000, "unknown": "ignored"}
)
print(window)
print(window.start_on)
print(window.to_record())
