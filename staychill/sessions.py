import logging

from staychill.services.payment import PaymentFlow

logger = logging.getLogger(__name__)


class PaymentSessionStore:
    """Process-local registry of open payment flows keyed by session id."""

    def __init__(self, max_sessions: int = 1000) -> None:
        self._sessions: dict[str, PaymentFlow] = {}
        self._max_sessions = max_sessions

    def _evict(self) -> None:
        if len(self._sessions) <= self._max_sessions:
            return
        # Remove oldest finished flows first, then the oldest abandoned ones
        candidates = sorted(
            self._sessions.values(),
            key=lambda f: (not f.is_finished, f.created_at),
        )
        for flow in candidates:
            if len(self._sessions) <= self._max_sessions:
                break
            self._sessions.pop(flow.session_id, None)
            if not flow.is_finished:
                logger.info("Evicting unfinished payment %s in state %s", flow.session_id, flow.state)
                flow.close()

    def add(self, flow: PaymentFlow) -> PaymentFlow:
        self._sessions[flow.session_id] = flow
        self._evict()
        return flow

    def get(self, session_id: str) -> PaymentFlow | None:
        return self._sessions.get(session_id)

    def discard(self, session_id: str) -> PaymentFlow | None:
        flow = self._sessions.pop(session_id, None)
        if flow is not None:
            flow.close()
        return flow

    def __len__(self) -> int:
        return len(self._sessions)
