from __future__ import annotations

from typing import TypeAlias, Union

# Unique identifier of a chat (int) or username of a channel/supergroup ("@name").
ChatId: TypeAlias = Union[int, str]
