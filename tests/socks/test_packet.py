# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket
import ipaddress
import unittest

from async_proxy.core import MalformedReply
from async_proxy.socks import (
    Socks4Packet, Socks4ReplyPacket, Socks5MethodSelectionPacket,
    Socks5MethodReplyPacket, Socks5RequestPacket, Socks5ReplyPacket,
    Socks5Destination, socks4Operations, socks4ReplyCodes, socks5Operations,
    socks5AddressTypes, socks5AuthMethods, socks5ReplyCodes,
)

from ..utils import unhexlify


# Examples taken from https://en.wikipedia.org/wiki/SOCKS
CLIENT_CONNECT_REQ = unhexlify("04 01 00 50 42 66 07 63 46 72 65 64 00")
SERVER_CONNECT_OK = unhexlify("00 5A 00 00 00 00 00 00")


class TestSocks4Packet(unittest.TestCase):

    def test_pack(self) -> None:
        pkt = Socks4Packet()
        pkt.vn = 4
        pkt.cd = socks4Operations.CONNECT
        pkt.dstport = 80
        pkt.dstip = socket.inet_aton('66.102.7.99')
        pkt.userid = b'Fred'
        self.assertEqual(
            pkt.pack(),
            CLIENT_CONNECT_REQ,
        )

    def test_pack_without_userid(self) -> None:
        pkt = Socks4Packet()
        pkt.vn = 4
        pkt.cd = socks4Operations.CONNECT
        pkt.dstport = 9000
        pkt.dstip = socket.inet_aton('203.0.113.7')
        self.assertEqual(pkt.pack(), unhexlify("04 01 23 28 CB 00 71 07 00"))

    def test_parse(self) -> None:
        wiki = memoryview(CLIENT_CONNECT_REQ)
        pkt = Socks4Packet()
        pkt.parse(wiki)
        self.assertEqual(pkt.vn, 4)
        self.assertEqual(pkt.cd, socks4Operations.CONNECT)
        self.assertEqual(pkt.dstport, 80)
        assert pkt.dstip
        self.assertEqual(socket.inet_ntoa(pkt.dstip), '66.102.7.99')
        self.assertEqual(pkt.userid, b'Fred')

    def test_parse_invalid(self) -> None:
        for raw in (
            CLIENT_CONNECT_REQ[:-1],
            b'\x05' + CLIENT_CONNECT_REQ[1:],
            CLIENT_CONNECT_REQ[:8],
        ):
            with self.assertRaises(ValueError):
                Socks4Packet().parse(memoryview(raw))


class TestSocks4ReplyPacket(unittest.TestCase):

    def test_parse(self) -> None:
        pkt = Socks4ReplyPacket()
        pkt.parse(SERVER_CONNECT_OK)
        self.assertEqual(pkt.vn, 0)
        self.assertEqual(pkt.cd, socks4ReplyCodes.GRANTED)

    def test_pack(self) -> None:
        pkt = Socks4ReplyPacket()
        pkt.cd = socks4ReplyCodes.GRANTED
        self.assertEqual(pkt.pack(), SERVER_CONNECT_OK)

    def test_wrong_version(self) -> None:
        with self.assertRaises(MalformedReply):
            Socks4ReplyPacket().parse(b'\x04' + SERVER_CONNECT_OK[1:])

    def test_wrong_length(self) -> None:
        with self.assertRaises(MalformedReply):
            Socks4ReplyPacket().parse(SERVER_CONNECT_OK[:2])


class TestSocks5MethodPackets(unittest.TestCase):

    def test_selection_pack(self) -> None:
        pkt = Socks5MethodSelectionPacket([socks5AuthMethods.NO_AUTH])
        self.assertEqual(pkt.pack(), b'\x05\x01\x00')

    def test_selection_parse(self) -> None:
        pkt = Socks5MethodSelectionPacket()
        pkt.parse(b'\x05\x02\x00\x02')
        self.assertEqual(pkt.methods, [0, 2])
        with self.assertRaises(ValueError):
            pkt.parse(b'\x05\x02\x00')

    def test_reply(self) -> None:
        pkt = Socks5MethodReplyPacket()
        pkt.parse(b'\x05\x00')
        self.assertEqual(pkt.method, socks5AuthMethods.NO_AUTH)
        self.assertEqual(Socks5MethodReplyPacket(0xFF).pack(), b'\x05\xff')

    def test_reply_invalid(self) -> None:
        for raw in (b'\x04\x00', b'\x05', b'\x05\x00\x00'):
            with self.assertRaises(MalformedReply):
                Socks5MethodReplyPacket().parse(raw)


class TestSocks5RequestPacket(unittest.TestCase):

    def test_pack_domain(self) -> None:
        pkt = Socks5RequestPacket(
            socks5Operations.CONNECT, Socks5Destination('example.com'), 443,
        )
        self.assertEqual(
            pkt.pack(),
            b'\x05\x01\x00\x03\x0bexample.com\x01\xbb',
        )

    def test_pack_ipv4(self) -> None:
        pkt = Socks5RequestPacket(
            socks5Operations.CONNECT, Socks5Destination('203.0.113.7'), 9000,
        )
        self.assertEqual(pkt.pack(), unhexlify('05 01 00 01 CB 00 71 07 23 28'))

    def test_pack_ipv6(self) -> None:
        pkt = Socks5RequestPacket(
            socks5Operations.CONNECT, Socks5Destination('2001:db8::1'), 80,
        )
        self.assertEqual(
            pkt.pack(),
            b'\x05\x01\x00\x04' + ipaddress.IPv6Address('2001:db8::1').packed + b'\x00\x50',
        )

    def test_parse(self) -> None:
        for dest in ('example.com', '203.0.113.7', '2001:db8::1'):
            raw = Socks5RequestPacket(
                socks5Operations.CONNECT, Socks5Destination(dest), 1080,
            ).pack()
            pkt = Socks5RequestPacket()
            pkt.parse(raw)
            self.assertEqual(pkt.cmd, socks5Operations.CONNECT)
            self.assertEqual(pkt.dstaddr, Socks5Destination(dest))
            self.assertEqual(pkt.dstport, 1080)


class TestSocks5ReplyPacket(unittest.TestCase):

    def test_parse_ipv4(self) -> None:
        pkt = Socks5ReplyPacket()
        pkt.parse_header(b'\x05\x00\x00\x01')
        self.assertEqual(pkt.rep, socks5ReplyCodes.SUCCEEDED)
        self.assertEqual(pkt.address_length(), 4)
        pkt.parse_address(b'\x7f\x00\x00\x01')
        pkt.parse_port(b'\x04\x38')
        self.assertEqual(pkt.bndaddr, Socks5Destination('127.0.0.1'))
        self.assertEqual(pkt.bndport, 1080)

    def test_parse_ipv6(self) -> None:
        pkt = Socks5ReplyPacket()
        pkt.parse_header(b'\x05\x00\x00\x04')
        self.assertEqual(pkt.address_length(), 16)
        pkt.parse_address(ipaddress.IPv6Address('::1').packed)
        self.assertEqual(pkt.bndaddr, Socks5Destination('::1'))

    def test_parse_domain(self) -> None:
        pkt = Socks5ReplyPacket()
        pkt.parse_header(b'\x05\x00\x00\x03')
        self.assertEqual(pkt.address_length(), 1)
        pkt.parse_address_length(b'\x09')
        self.assertEqual(pkt.address_length(), 9)
        pkt.parse_address(b'localhost')
        self.assertEqual(pkt.bndaddr, Socks5Destination.domain_name('localhost'))

    def test_wrong_version(self) -> None:
        with self.assertRaises(MalformedReply):
            Socks5ReplyPacket().parse_header(b'\x04\x00\x00\x01')

    def test_unknown_address_type(self) -> None:
        with self.assertRaises(MalformedReply):
            Socks5ReplyPacket().parse_header(b'\x05\x00\x00\x02')

    def test_short_port(self) -> None:
        with self.assertRaises(MalformedReply):
            Socks5ReplyPacket().parse_port(b'\x00')

    def test_pack(self) -> None:
        pkt = Socks5ReplyPacket()
        pkt.rep = socks5ReplyCodes.SUCCEEDED
        self.assertEqual(pkt.pack(), b'\x05\x00\x00\x01\x00\x00\x00\x00\x00\x00')
        self.assertEqual(socks5AddressTypes.IPV4, pkt.pack()[3])
