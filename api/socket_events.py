"""
Socket.IO push channel. Viewers only connect; the server emits one
``message`` event per generated traffic record. Clients need a Socket.IO
client library; a bare WebSocket cannot read these frames.
"""

from typing import Any, Dict
from flask import request
from flask_socketio import SocketIO
from core.subscriber_interface import ISubscriber
from core.subscriber_registry import SubscriberRegistry

PUSH_EVENT = 'message'

class SocketIOSubscriber(ISubscriber):
    """One connected Socket.IO session."""

    def __init__(self, socketio: SocketIO, sid: str):
        self.socketio = socketio
        self.sid = sid

    @property
    def subscriber_id(self) -> str:
        return self.sid

    def send(self, message: Dict[str, Any]) -> None:
        self.socketio.emit(PUSH_EVENT, message, to=self.sid)

def register_socket_events(socketio: SocketIO, registry: SubscriberRegistry) -> None:
    """Track connected sessions in ``registry``."""

    @socketio.on('connect')
    def handle_connect(auth=None):
        registry.add(SocketIOSubscriber(socketio, request.sid))

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        registry.remove(request.sid)
