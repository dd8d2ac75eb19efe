"""Default endpoints of the UnifAI network."""

FRONTEND_API_ENDPOINT = "https://api.unifai.network"
BACKEND_API_ENDPOINT = "https://backend.unifai.network/api/v1"
BACKEND_WS_ENDPOINT = "wss://backend.unifai.network/ws"
TRANSACTION_API_ENDPOINT = "https://txbuilder.unifai.network/api"
