#!/usr/bin/python3
"""Commandline tool to query HomeMatic interface processes via XML-RPC."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import Any, Final

import orjson

from hmrpc import config
from hmrpc.client import Client, create_client
from hmrpc.const import (
    BIDCOS_RF_PORT,
    BIDCOS_WIRED_PORT,
    ENV_HOST,
    ENV_PASSWORD,
    ENV_PORT,
    ENV_USERNAME,
    ParamsetKey,
)
from hmrpc.exceptions import BaseHomematicException, DecodeException
from hmrpc.model.device import get_devices, index_device_descriptions, resolve_channels
from hmrpc.projection import (
    project_device_description,
    project_paramset,
    project_paramset_description,
    project_service_message,
)

_LOGGER: Final = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the cli."""
    parser = argparse.ArgumentParser(
        description="Commandline tool to query HomeMatic interface processes via XML-RPC",
    )
    parser.add_argument(
        "--host",
        "-H",
        default=os.environ.get(ENV_HOST),
        type=str,
        help=f"Hostname / IP address to connect to. Default: ${ENV_HOST}",
    )
    parser.add_argument(
        "--port",
        "-p",
        default=os.environ.get(ENV_PORT, str(config.DEFAULT_PORT)),
        type=int,
        help=(
            f"Port to connect to, {BIDCOS_WIRED_PORT} for wired and {BIDCOS_RF_PORT} for RF."
            f" Default: ${ENV_PORT} or {config.DEFAULT_PORT}"
        ),
    )
    parser.add_argument(
        "--path",
        type=str,
        help="Path, used for heating groups",
    )
    parser.add_argument(
        "--username",
        "-U",
        nargs="?",
        default=os.environ.get(ENV_USERNAME),
        help=f"Username required for access. Default: ${ENV_USERNAME}",
    )
    parser.add_argument(
        "--password",
        "-P",
        nargs="?",
        default=os.environ.get(ENV_PASSWORD),
        help=f"Password required for access. Default: ${ENV_PASSWORD}",
    )
    parser.add_argument(
        "--tls",
        "-t",
        action="store_true",
        help="Enable TLS encryption",
    )
    parser.add_argument(
        "--verify",
        "-v",
        action="store_true",
        help="Verify TLS encryption",
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="Enable debug logging",
    )

    namespaces = parser.add_subparsers(dest="namespace", required=True)

    device = namespaces.add_parser("device", help="Device related commands")
    device_commands = device.add_subparsers(dest="command", required=True)
    device_list = device_commands.add_parser("list", help="Lists all devices")
    device_list.add_argument("--channels", action="store_true", help="Show device channels")
    device_list.set_defaults(func=_device_list)
    device_inspect = device_commands.add_parser("inspect", help="Describe device or channel")
    device_inspect.add_argument("address", help="Device or channel address")
    device_inspect.set_defaults(func=_device_inspect)

    message = namespaces.add_parser("message", help="Service message related commands")
    message_commands = message.add_subparsers(dest="command", required=True)
    message_list = message_commands.add_parser("list", help="Lists all service messages")
    message_list.set_defaults(func=_message_list)

    param = namespaces.add_parser("param", help="Parameter related commands")
    param_commands = param.add_subparsers(dest="command", required=True)
    param_list = param_commands.add_parser("list", help="List parameter descriptions")
    param_list.add_argument("address", help="Device or channel address")
    param_list.add_argument("paramset_key", help="Paramset of HomeMatic device")
    param_list.set_defaults(func=_param_list)
    param_get = param_commands.add_parser("get", help="Get the values of a paramset")
    param_get.add_argument("address", help="Device or channel address")
    param_get.add_argument(
        "paramset_key",
        nargs="?",
        default=ParamsetKey.VALUES,
        help="Paramset of HomeMatic device. Default: VALUES",
    )
    param_get.set_defaults(func=_param_get)
    return parser


async def _device_list(client: Client, args: argparse.Namespace) -> Any:
    """Return all devices, optionally with their resolved channels."""
    device_descriptions = await client.list_devices()
    index = index_device_descriptions(device_descriptions)
    result: list[dict[str, Any]] = []
    for device in get_devices(device_descriptions):
        entry = project_device_description(device)
        if args.channels:
            entry["channels"] = [
                project_device_description(channel)
                for channel in resolve_channels(device, index)
            ]
        result.append(entry)
    return result


async def _device_inspect(client: Client, args: argparse.Namespace) -> Any:
    """Return the description of a device or channel."""
    return project_device_description(await client.get_device_description(args.address))


async def _message_list(client: Client, args: argparse.Namespace) -> Any:
    """Return all pending service messages."""
    return [project_service_message(sm) for sm in await client.get_service_messages()]


async def _param_list(client: Client, args: argparse.Namespace) -> Any:
    """Return the parameter descriptions of a paramset."""
    return project_paramset_description(
        await client.get_paramset_description(args.address, args.paramset_key)
    )


async def _param_get(client: Client, args: argparse.Namespace) -> Any:
    """Return the values of a paramset."""
    return project_paramset(await client.get_paramset(args.address, args.paramset_key))


async def _run(args: argparse.Namespace) -> Any:
    """Run the selected command against the interface process."""
    client = await create_client(
        host=args.host,
        port=args.port,
        path=args.path,
        username=args.username,
        password=args.password,
        tls=args.tls,
        verify_tls=args.verify,
    )
    try:
        async with asyncio.timeout(config.TIMEOUT):
            return await args.func(client, args)
    finally:
        client.stop()


def main(argv: list[str] | None = None) -> None:
    """Start the cli."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.host is None:
        parser.error(f"--host or ${ENV_HOST} is required")
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        result = asyncio.run(_run(args))
    except DecodeException as dex:
        _LOGGER.error(
            "Invalid response for %s: %s",
            getattr(args, "address", args.host),
            dex,
        )
        sys.exit(1)
    except (BaseHomematicException, TimeoutError) as ex:
        _LOGGER.error("Request to %s failed: %s", args.host, ex)
        sys.exit(1)

    sys.stdout.write(orjson.dumps(result, option=orjson.OPT_INDENT_2).decode())
    sys.stdout.write("\n")
    sys.exit(0)


if __name__ == "__main__":
    main()
