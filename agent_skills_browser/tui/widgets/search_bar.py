"""Search Bar Widget - Live skill search input"""

from textual.message import Message
from textual.widgets import Input


class SearchBar(Input):
    """Search input that reports the normalized query when it changes"""

    DEFAULT_CSS = """
    SearchBar {
        width: 1fr;
    }
    """

    class SearchChanged(Message):
        """Sent when the effective search query changes"""

        def __init__(self, query: str) -> None:
            self.query = query
            super().__init__()

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("placeholder", "🔍 Search name, description or category...")
        super().__init__(*args, **kwargs)
        self._last_query = ""

    @staticmethod
    def normalize_query(text: str) -> str:
        """Trim the query and collapse runs of whitespace"""
        return " ".join(text.split())

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        query = self.normalize_query(event.value)
        # Whitespace-only edits do not change the result set.
        if query == self._last_query:
            return
        self._last_query = query
        self.post_message(self.SearchChanged(query))

    def clear_search(self) -> None:
        self.value = ""
