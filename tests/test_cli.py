import contextlib
import io
import json
import os
import unittest
from unittest.mock import patch

from coinrpc import cli
from coinrpc.client import WalletClient
from coinrpc.config import ClientConfig


class FakeTransport:
    def __init__(self, envelope: dict):
        self.body = json.dumps(envelope).encode("utf-8")
        self.requests: list[dict] = []

    def post(self, payload: bytes) -> tuple[int, bytes]:
        self.requests.append(json.loads(payload))
        return 200, self.body


class CLITests(unittest.TestCase):
    def _run(self, argv: list[str], envelope: dict) -> tuple[str, FakeTransport]:
        transport = FakeTransport(envelope)
        client = WalletClient(ClientConfig(confirmations=2), transport)
        args = cli.build_parser().parse_args(argv)
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            cli.run(args, client)
        return out.getvalue(), transport

    def test_newaddress(self) -> None:
        out, transport = self._run(["newaddress"], {"result": "Dabc"})
        self.assertEqual(out.strip(), "Dabc")
        self.assertEqual(transport.requests[0]["method"], "getnewaddress")

    def test_send_canonicalises_amount(self) -> None:
        out, transport = self._run(["send", "Dxyz", "1e-5"], {"result": "ff" * 32})
        self.assertEqual(out.strip(), "ff" * 32)
        self.assertEqual(transport.requests[0]["params"], ["Dxyz", "0.00001"])

    def test_settxfee_canonicalises_fee(self) -> None:
        out, transport = self._run(["settxfee", "0.00040960"], {"result": True})
        self.assertEqual(out.strip(), "true")
        self.assertEqual(transport.requests[0]["params"], ["0.0004096"])

    def test_walletinfo_prints_wire_keys(self) -> None:
        out, _ = self._run(["walletinfo"], {"result": {"balance": "1.5", "txcount": "2"}})
        data = json.loads(out)
        self.assertEqual(data["balance"], 1.5)
        self.assertEqual(data["txcount"], 2)

    def test_checktx(self) -> None:
        out, _ = self._run(["checktx", "ab"], {"result": {"confirmations": "2"}})
        self.assertEqual(out.strip(), "confirmed")
        out, _ = self._run(["checktx", "ab"], {"result": {"confirmations": 1}})
        self.assertEqual(out.strip(), "pending")

    def test_call_decodes_json_params(self) -> None:
        out, transport = self._run(["call", "listunspent", "1", "9999999", "Dxyz"], {"result": []})
        self.assertEqual(json.loads(out), [])
        self.assertEqual(transport.requests[0]["params"], [1, 9999999, "Dxyz"])

    def test_main_reports_rpc_errors(self) -> None:
        transport = FakeTransport({"error": {"code": -6, "message": "Insufficient funds"}})

        def _factory(config: ClientConfig) -> WalletClient:
            return WalletClient(config, transport)

        env = {key: value for key, value in os.environ.items() if not key.startswith("COINRPC_")}
        err = io.StringIO()
        with patch.dict(os.environ, env, clear=True), patch.object(cli, "WalletClient", _factory):
            with contextlib.redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
                cli.main(["--url", "http://127.0.0.1:14022/", "send", "Dxyz", "1"])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("RPC error -6: Insufficient funds", err.getvalue())

    def test_main_reports_invalid_amount(self) -> None:
        transport = FakeTransport({"result": "ff" * 32})

        def _factory(config: ClientConfig) -> WalletClient:
            return WalletClient(config, transport)

        env = {key: value for key, value in os.environ.items() if not key.startswith("COINRPC_")}
        err = io.StringIO()
        with patch.dict(os.environ, env, clear=True), patch.object(cli, "WalletClient", _factory):
            with contextlib.redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
                cli.main(["--url", "http://127.0.0.1:14022/", "send", "Dxyz", "abc"])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Invalid argument", err.getvalue())
        self.assertEqual(transport.requests, [])

    def test_main_reports_config_errors(self) -> None:
        err = io.StringIO()
        with contextlib.redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            cli.main(["--url", "ftp://node/", "balance"])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Config error", err.getvalue())


if __name__ == "__main__":
    unittest.main()
