"""Trap operation codes of the TCP/IP device."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class IPTrap(IntEnum):
    """Operation numbers accepted by the IP device's I/O trap."""

    LISTEN = 0x50
    SEND = 0x51
    SENDTO = 0x52
    RECV = 0x53
    RECVFM = 0x54
    GETOPT = 0x55
    SETOPT = 0x56
    SHUTDWN = 0x57
    BIND = 0x58
    CONNECT = 0x59
    FCNTL = 0x5A

    GETHOSTNAME = 0x5B
    GETSOCKNAME = 0x5C
    GETPEERNAME = 0x5D

    GETHOSTBYNAME = 0x5E
    GETHOSTBYADDR = 0x5F
    SETHOSTENT = 0x60
    ENDHOSTENT = 0x61
    H_ERRNO = 0x62

    GETSERVENT = 0x63
    GETSERVBYNAME = 0x64
    GETSERVBYPORT = 0x65
    SETSERVENT = 0x66
    ENDSERVENT = 0x67

    GETNETENT = 0x68
    GETNETBYNAME = 0x69
    GETNETBYADDR = 0x6A
    SETNETENT = 0x6B
    ENDNETENT = 0x6C

    GETPROTOENT = 0x6D
    GETPROTOBYNAME = 0x6E
    GETPROTOBYNUMBER = 0x6F
    SETPROTOENT = 0x70
    ENDPROTOENT = 0x71

    INET_ATON = 0x72
    INET_ADDR = 0x73
    INET_NETWORK = 0x74
    INET_NTOA = 0x75
    INET_MAKEADDR = 0x76
    INET_LNAOF = 0x77
    INET_NETOF = 0x78

    IOCTL = 0x79
    GETDOMAIN = 0x7A
    H_STRERROR = 0x7B
    ERRNO = 0x7C