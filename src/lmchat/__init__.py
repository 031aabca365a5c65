"""
lmchat: a chat window for a locally running language-model server.

The package is split into parts that each hide one design decision:
the conversation controller owns state, the bridge hides where the
network relay runs, and the relay is the only code that talks HTTP.
"""

__version__ = "0.1.0"

from .bridge import Bridge, RelayResult, RequestDescriptor, create_bridge
from .config import ChatConfig, ConfigStore, create_config_store
from .conversation import ConversationController, Message, Role

__all__ = [
    "Bridge",
    "ChatConfig",
    "ConfigStore",
    "ConversationController",
    "Message",
    "RelayResult",
    "RequestDescriptor",
    "Role",
    "create_bridge",
    "create_config_store",
]
