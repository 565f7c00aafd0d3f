"""Cliente da API Web do Slack.

Orquestra o envio de uma chamada:
- valida token e formato do payload (antes de qualquer IO)
- serializa payloads tipados (ida e volta pelo JSON)
- dispara BEFORE_SEND, transmite, interpreta JSON, dispara AFTER_RECEIVE
- desserializa no tipo de resposta declarado pelo payload

Qualquer falha é relançada como SlackApiError, com a causa encadeada.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.protocols.slack_client import SlackPayloadProtocol

from .events import AfterReceiveEvent, ApiClientEvent, BeforeSendEvent, SlackEventDispatcher
from .http_transport import HttpTransportConfig, SlackHttpTransport
from .serializer import PydanticSerializer
from .slack_errors import (
    PayloadArgumentError,
    ResponseShapeError,
    SlackApiError,
    SlackTransportError,
    parse_slack_error,
)
from .slack_logging import log_call_failure, log_slack_error, log_success

if TYPE_CHECKING:
    from app.protocols.slack_client import (
        AfterReceiveListener,
        BeforeSendListener,
        SlackSerializerProtocol,
        SlackTransportProtocol,
        TransportResponse,
    )
    from config.settings.slack import SlackSettings

logger: logging.Logger = logging.getLogger(__name__)

API_BASE_URL = "https://slack.com/api/"
TOKEN_FIELD = "token"
SUPPORTED_HTTP_METHODS = frozenset({"GET", "POST"})


@dataclass(frozen=True)
class PreparedCall:
    """Chamada normalizada (genérica ou tipada).

    ``response_type`` é None no caminho genérico: o mapa bruto é retornado.
    """

    method: str
    fields: dict[str, Any]
    http_method: str
    response_type: type[Any] | None = None

    @property
    def is_typed(self) -> bool:
        return self.response_type is not None


class SlackApiClient:
    """Cliente síncrono da API Web do Slack.

    A configuração (token, serializer, transporte, dispatcher) é definida
    na construção e não muda durante a vida da instância.
    """

    def __init__(
        self,
        serializer: SlackSerializerProtocol | None = None,
        transport: SlackTransportProtocol | None = None,
        dispatcher: SlackEventDispatcher | None = None,
        token: str | None = None,
        *,
        base_url: str = API_BASE_URL,
        owns_transport: bool | None = None,
    ) -> None:
        self._serializer = serializer if serializer is not None else PydanticSerializer()
        self._owns_transport = transport is None if owns_transport is None else owns_transport
        self._transport = transport if transport is not None else SlackHttpTransport()
        self._dispatcher = dispatcher if dispatcher is not None else SlackEventDispatcher()
        self._token = token or None
        self._base_url = base_url

    @property
    def base_url(self) -> str:
        return self._base_url

    def add_listener(
        self,
        event: ApiClientEvent,
        listener: BeforeSendListener | AfterReceiveListener,
    ) -> None:
        """Registra listener de ciclo de vida (BEFORE_SEND/AFTER_RECEIVE)."""
        self._dispatcher.add_listener(event, listener)

    def send(
        self,
        payload: SlackPayloadProtocol | Mapping[str, Any],
        method: str | None = None,
        token: str | None = None,
        *,
        http_method: str | None = None,
    ) -> Any:
        """Envia um payload para a API do Slack.

        Args:
            payload: Payload tipado (SlackPayload) ou mapa genérico de campos
            method: Método de fio, obrigatório para mapas genéricos
                (ignorado para payloads tipados)
            token: Token da chamada; sobrepõe o token da instância
            http_method: "GET" ou "POST"; padrão é o verbo do payload
                tipado ou GET

        Returns:
            Instância do tipo de resposta do payload tipado, ou o mapa
            de resposta bruto para payloads genéricos.

        Raises:
            SlackApiError: Qualquer falha, com a exceção original em __cause__.
        """
        resolved_method = method
        try:
            resolved_token = self._resolve_token(token)
            call = self._prepare_call(payload, method, http_method)
            resolved_method = call.method

            response_data = self._send_raw(call, resolved_token)

            if call.is_typed:
                return self._deserialize_response(response_data, call.response_type)
            return response_data
        except Exception as exc:
            log_call_failure(resolved_method, exc)
            raise SlackApiError("Falha ao enviar payload para a API do Slack") from exc

    def close(self) -> None:
        """Fecha o transporte se foi criado por este cliente."""
        if not self._owns_transport:
            return
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> SlackApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _resolve_token(self, token: str | None) -> str:
        resolved = token or self._token
        if not resolved:
            raise PayloadArgumentError(
                "É necessário informar um token para enviar o payload "
                "(nenhum foi fornecido na construção do cliente)"
            )
        return resolved

    def _prepare_call(
        self,
        payload: SlackPayloadProtocol | Mapping[str, Any],
        method: str | None,
        http_method: str | None,
    ) -> PreparedCall:
        """Normaliza payload genérico ou tipado em uma PreparedCall."""
        if isinstance(payload, Mapping):
            if not method:
                raise PayloadArgumentError("Payloads genéricos exigem o método de fio")
            return PreparedCall(
                method=method,
                fields=dict(payload),
                http_method=_normalize_http_method(http_method or "GET"),
            )

        if isinstance(payload, SlackPayloadProtocol):
            if not payload.method:
                raise PayloadArgumentError(
                    f"{type(payload).__name__} não declara o método de fio"
                )
            return PreparedCall(
                method=payload.method,
                fields=self._serialize_payload(payload),
                http_method=_normalize_http_method(http_method or payload.http_method),
                response_type=payload.response_type,
            )

        raise PayloadArgumentError(
            "O payload deve ser um mapa de campos ou um objeto SlackPayload, "
            f"recebido {type(payload).__name__}"
        )

    def _send_raw(self, call: PreparedCall, token: str) -> dict[str, Any]:
        """Transmite a chamada e retorna o mapa de resposta interpretado."""
        url, params, data = self._build_request(call, token)
        outgoing = params if params is not None else data

        self._dispatcher.dispatch(
            ApiClientEvent.BEFORE_SEND,
            BeforeSendEvent.snapshot(call.method, outgoing),
        )

        response = self._transport.request(call.http_method, url, params=params, data=data)
        response_data = _parse_response(response)

        self._dispatcher.dispatch(
            ApiClientEvent.AFTER_RECEIVE,
            AfterReceiveEvent.snapshot(call.method, response_data),
        )

        error_info = parse_slack_error(response_data)
        if error_info is not None:
            log_slack_error(error_info, call.http_method, call.method)
        else:
            log_success(call.http_method, call.method, response.status_code)
        return response_data

    def _build_request(
        self,
        call: PreparedCall,
        token: str,
    ) -> tuple[str, dict[str, Any] | None, dict[str, Any] | None]:
        """Monta URL e campos (query para GET, form body para POST).

        Returns:
            (url, params, data); apenas um de params/data é preenchido.
        """
        try:
            fields = _encode_fields(call.fields)
        except (TypeError, ValueError) as exc:
            raise SlackTransportError("Falha ao montar a requisição") from exc
        fields[TOKEN_FIELD] = token

        url = f"{self._base_url}{call.method}"
        if call.http_method != "GET":
            data = dict(fields)
            data[TOKEN_FIELD] = token
            return url, None, data
        return url, fields, None

    def _serialize_payload(self, payload: Any) -> dict[str, Any]:
        """Serializa o payload e reinterpreta o JSON como mapa de campos."""
        fields = json.loads(self._serializer.serialize(payload))
        if not isinstance(fields, dict):
            raise PayloadArgumentError(
                f"O payload serializado deve ser um objeto JSON, obtido {type(fields).__name__}"
            )
        return fields

    def _deserialize_response(self, response_data: dict[str, Any], response_type: type[Any]) -> Any:
        result = self._serializer.deserialize(json.dumps(response_data), response_type)

        if result is None or isinstance(result, (dict, list, str, int, float, bool)):
            raise ResponseShapeError("A resposta não pôde ser desserializada em um objeto")

        if not isinstance(result, response_type):
            raise ResponseShapeError(
                "A resposta não pôde ser desserializada no tipo esperado "
                f"({type(result).__name__} não é instância de {response_type.__name__})"
            )
        return result


def _normalize_http_method(http_method: str) -> str:
    normalized = http_method.upper()
    if normalized not in SUPPORTED_HTTP_METHODS:
        raise PayloadArgumentError(f"Verbo HTTP não suportado: {http_method}")
    return normalized


def _encode_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Achata valores para query/form.

    None é descartado, bool vira "true"/"false" e estruturas aninhadas
    (dicts, listas de dicts) viram JSON.
    """
    encoded: dict[str, Any] = {}
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        elif isinstance(value, dict) or (
            isinstance(value, (list, tuple)) and any(isinstance(item, (dict, list)) for item in value)
        ):
            encoded[key] = json.dumps(value, separators=(",", ":"))
        else:
            encoded[key] = value
    return encoded


def _parse_response(response: TransportResponse) -> dict[str, Any]:
    try:
        response_data = json.loads(response.content)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.error("slack_response_invalid_json", extra={"status_code": response.status_code})
        raise ResponseShapeError("Resposta da API do Slack não é JSON válido") from exc

    if not isinstance(response_data, dict):
        raise ResponseShapeError(
            f'Esperado objeto JSON na resposta, obtido "{type(response_data).__name__}"'
        )
    return response_data


def create_slack_api_client(
    settings: SlackSettings | None = None,
    dispatcher: SlackEventDispatcher | None = None,
) -> SlackApiClient:
    """Factory para criar cliente Slack com config padrão.

    Args:
        settings: SlackSettings opcional. Se None, carrega do ambiente.
        dispatcher: Dispatcher de eventos opcional (listeners compartilhados).

    Returns:
        Cliente configurado para a API Web do Slack.
    """
    # Import local para evitar dependência circular
    from config.settings.slack import get_slack_settings

    slack = settings or get_slack_settings()
    transport = SlackHttpTransport(
        HttpTransportConfig(
            timeout_seconds=slack.request_timeout_seconds,
            user_agent=slack.user_agent,
        )
    )
    return SlackApiClient(
        transport=transport,
        dispatcher=dispatcher,
        token=slack.token or None,
        base_url=slack.api_base_url,
        owns_transport=True,
    )
