#!/usr/bin/env python3
# session.py - Host/client unlock handshake

from enum import Enum, IntEnum

import network
from geometry import BUFFER_SIZE, DEFAULT_ADDRESS, DEFAULT_PORT, DEFAULT_TINT, GOAL_RADIUS
from protocol import format_unlock, parse_unlock


class Role(Enum):
    HOST = "host"
    CLIENT = "client"


class SessionState(IntEnum):
    INIT = 0
    LISTENING = 1      # host, waiting for its client
    CONNECTING = 2     # client, connect in progress
    CONNECTED = 3
    UNLOCKED = 4       # client, unlock received
    GOAL_REACHED = 5
    DISCONNECTED = -1  # setup failed, playing without a peer


class Session:
    """
    One side of the handshake.

    The host moves freely from the start and, the first time it reaches its
    goal, sends an unlock message to its client if one is connected. The
    client starts locked and polls for that message every tick.

    Everything runs inline from the game loop: tick() once per frame, and
    check_goal() (or reach_goal()) when the loop has a distance to the goal.
    """

    def __init__(self, role, address=DEFAULT_ADDRESS, port=DEFAULT_PORT,
                 poll=network.poll_readable):
        self.role = role
        self.address = address
        self.port = port
        self.poll = poll

        self.state = SessionState.INIT
        self.listener = None    # host only
        self.connection = None  # host: accepted client, client: our socket

        self.movement_locked = role is Role.CLIENT
        self.goal_reached = False
        self.tint = DEFAULT_TINT
        self.messages_sent = 0

    @property
    def is_host(self):
        return self.role is Role.HOST

    @property
    def connected(self):
        return self.connection is not None

    def start(self):
        """Open the listening socket (host) or connect (client)"""
        if self.is_host:
            self._start_host()
        else:
            self._start_client()
        return self.state

    def _start_host(self):
        self.listener = network.create_socket()
        if self.listener is None or not network.bind_and_listen(self.listener, self.port):
            print("Host setup failed, playing without a client")
            self.listener = network.close_socket(self.listener)
            self.state = SessionState.DISCONNECTED
            return

        print(f"Host listening on port {self.port}")
        self.state = SessionState.LISTENING

    def _start_client(self):
        self.state = SessionState.CONNECTING
        self.connection = network.create_socket()
        if self.connection is None:
            self.state = SessionState.DISCONNECTED
            return

        if not network.connect_to_server(self.connection, self.address, self.port):
            print("Client could not reach the host, movement stays locked")
            self.connection = network.close_socket(self.connection)
            self.state = SessionState.DISCONNECTED
            return

        print(f"Connected to host at {self.address}:{self.port}")
        self.state = SessionState.CONNECTED

    def retry_connect(self):
        """Try connecting again after a failed start (client only)"""
        if self.is_host or self.connected or self.state is not SessionState.DISCONNECTED:
            return False
        self._start_client()
        return self.connected

    def tick(self):
        """Per-frame network step, never blocks"""
        if self.is_host:
            self._tick_host()
        else:
            self._tick_client()

    def _tick_host(self):
        # Exactly one client: stop polling the listener once we have it
        if self.connected or self.listener is None:
            return
        if not self.poll(self.listener):
            return

        conn = network.accept_connection(self.listener)
        if conn is not None:
            self.connection = conn
            if not self.goal_reached:
                self.state = SessionState.CONNECTED

    def _tick_client(self):
        if not self.movement_locked or not self.connected:
            return
        if not self.poll(self.connection):
            return

        data = network.receive_data(self.connection, BUFFER_SIZE)
        if not data:
            # Peer closed or read failed; both count as nothing this tick
            return

        tint = parse_unlock(data)
        if tint is None:
            return

        self.tint = tint
        self.movement_locked = False
        self.state = SessionState.UNLOCKED
        print("Unlock received, tint %.3f %.3f %.3f" % self.tint)

    def reach_goal(self, tint=None):
        """
        Goal action, fires at most once.

        The host forwards tint to its client (when connected). Returns True
        only on the call that actually fired.
        """
        if self.goal_reached:
            return False
        if self.movement_locked:
            return False

        if self.is_host:
            if tint is not None:
                self.tint = tuple(tint)
            if self.connected:
                if network.send_data(self.connection, format_unlock(self.tint)):
                    self.messages_sent += 1
                    print("Unlock sent to client")
            else:
                print("Goal reached with no client connected")

        self.goal_reached = True
        self.state = SessionState.GOAL_REACHED
        return True

    def check_goal(self, distance, threshold=GOAL_RADIUS, tint=None):
        """Proximity trigger: reach the goal once distance drops under threshold"""
        if distance >= threshold:
            return False
        return self.reach_goal(tint)

    def close(self):
        self.connection = network.close_socket(self.connection)
        self.listener = network.close_socket(self.listener)
