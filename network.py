#!/usr/bin/env python3
# network.py - Socket primitives for the host/client handshake
#
# A handle is a socket object, or None for an invalid handle. Failures are
# printed and reported through the return value; nothing here raises.

import select
import socket

from geometry import BUFFER_SIZE


def create_socket():
    """Allocate an IPv4 stream socket, None on failure"""
    try:
        return socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as e:
        print(f"Error creating socket: {e}")
        return None


def bind_and_listen(sock, port):
    """Bind to all interfaces and listen for a single peer"""
    if sock is None:
        return False
    try:
        # Allow reusing the port right after a previous run
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(("", port))
    except OSError as e:
        print(f"Error binding port {port}: {e}")
        return False

    try:
        sock.listen(1)
    except OSError as e:
        print(f"Error listening: {e}")
        return False
    return True


def accept_connection(server_sock):
    """Accept a pending peer, None if there is none or accept fails"""
    if server_sock is None:
        return None
    try:
        conn, addr = server_sock.accept()
    except OSError as e:
        print(f"Error accepting connection: {e}")
        return None
    print(f"Peer connected from {addr[0]}:{addr[1]}")
    return conn


def connect_to_server(sock, address, port):
    """Connect to a numeric IPv4 address"""
    if sock is None:
        return False
    try:
        socket.inet_pton(socket.AF_INET, address)
    except (OSError, TypeError):
        print(f"Invalid address: {address}")
        return False

    try:
        sock.connect((address, port))
    except OSError as e:
        print(f"Error connecting to {address}:{port}: {e}")
        return False
    return True


def send_data(sock, data):
    """Single best-effort send, no retry on a short write"""
    if sock is None:
        return False
    try:
        sock.send(data)
    except OSError as e:
        print(f"Error sending data: {e}")
        return False
    return True


def receive_data(sock, size=BUFFER_SIZE):
    """
    Single recv call.

    Returns the bytes read, b"" when the peer has shut down, or None on
    error.
    """
    if sock is None:
        return None
    try:
        return sock.recv(size)
    except OSError as e:
        print(f"Error receiving data: {e}")
        return None


def close_socket(sock):
    """Close a handle if it is valid. Returns the invalid handle."""
    if sock is not None:
        try:
            sock.close()
        except OSError as e:
            print(f"Error closing socket: {e}")
    return None


def poll_readable(sock, timeout=0.0):
    """Readiness check, zero timeout by default so a frame never blocks"""
    if sock is None:
        return False
    try:
        readable, _, _ = select.select([sock], [], [], timeout)
    except (OSError, ValueError) as e:
        print(f"Error polling socket: {e}")
        return False
    return sock in readable
