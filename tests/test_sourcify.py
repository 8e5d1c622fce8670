import json

import pytest
import requests
import responses

from hedeploy.utils.constants import SOURCIFY_SERVER_URL, SOURCIFY_V2_SERVER_URL
from hedeploy.utils.custom_exceptions import ResourceError, VerificationError
from hedeploy.utils.resources import ContractResources
from hedeploy.utils.sourcify import (
    build_solc_input,
    build_v1_request,
    build_v2_request,
    find_chain_id,
    verify_v1,
    verify_v2,
)

V1_URL = f"{SOURCIFY_SERVER_URL}/verify"
V2_URL = f"{SOURCIFY_V2_SERVER_URL}/verify/solc-json"


def test_find_chain_id_testnet():
    assert find_chain_id("testnet") == 296


def test_find_chain_id_mainnet():
    assert find_chain_id("mainnet") == 295


def test_find_chain_id_previewnet_and_unknown_fall_back_to_default():
    assert find_chain_id("previewnet") == 297
    assert find_chain_id("localhost") == 297
    assert find_chain_id("") == 297


def test_v1_request_without_imports_has_source_and_metadata_only(resource_dir):
    request = build_v1_request(
        "0.0.1043", "testnet", "HelloWorld", "HelloWorld", [], ContractResources(str(resource_dir))
    )

    assert request["address"] == "0000000000000000000000000000000000000413"
    assert request["chain"] == "296"
    assert list(request["files"]) == ["metadata-1.json", "HelloWorld"]
    assert request["files"]["HelloWorld"] == "contract HelloWorld { string greeting; }"
    assert request["files"]["metadata-1.json"].startswith('{"compiler"')


def test_v1_request_appends_imports_with_extension(resource_dir):
    request = build_v1_request(
        "0.0.1043", "mainnet", "HelloWorld", "HelloWorld", ["Greeter"], ContractResources(str(resource_dir))
    )

    assert list(request["files"]) == ["metadata-1.json", "HelloWorld", "Greeter.sol"]
    assert request["chain"] == "295"


def test_v1_request_missing_import_raises(resource_dir):
    with pytest.raises(ResourceError, match="Missing.sol"):
        build_v1_request(
            "0.0.1043", "testnet", "HelloWorld", "HelloWorld", ["Missing"], ContractResources(str(resource_dir))
        )


def test_solc_input_keys_sources_by_file_name(resource_dir):
    solc_input = build_solc_input("HelloWorld", ["Greeter"], ContractResources(str(resource_dir)))

    assert solc_input == {
        "language": "Solidity",
        "sources": {
            "HelloWorld.sol": {"content": "contract HelloWorld { string greeting; }"},
            "Greeter.sol": {"content": "contract Greeter {}"},
        },
    }


def test_v2_request_wraps_solc_input_as_single_file(resource_dir):
    request = build_v2_request(
        "0.0.1043",
        "previewnet",
        "HelloWorld",
        "HelloWorld",
        "0.8.17+commit.8df45f5f",
        [],
        ContractResources(str(resource_dir)),
    )

    assert list(request) == ["address", "chain", "files", "compilerVersion", "contractName"]
    assert request["chain"] == "297"
    assert request["compilerVersion"] == "0.8.17+commit.8df45f5f"
    assert request["contractName"] == "HelloWorld"
    assert list(request["files"]) == ["SolcJsonInput.json"]

    solc_input_text = request["files"]["SolcJsonInput.json"]
    assert isinstance(solc_input_text, str)
    assert json.loads(solc_input_text)["sources"]["HelloWorld.sol"]["content"].startswith("contract")


@responses.activate
def test_verify_v1_posts_compact_json_and_returns_content(resource_dir):
    responses.add(
        responses.POST,
        V1_URL,
        json={"result": [{"address": "0x413", "status": "perfect"}]},
        status=200,
    )

    result = verify_v1(
        "0.0.1043", "testnet", "HelloWorld", "HelloWorld", [], ContractResources(str(resource_dir))
    )

    assert result.status_code == 200
    assert result.accepted
    assert "perfect" in result.body

    assert len(responses.calls) == 1
    sent = responses.calls[0].request
    assert sent.headers["Content-Type"] == "application/json"
    assert b'"chain":"296"' in sent.body
    assert json.loads(sent.body)["files"]["HelloWorld"].startswith("contract")


@responses.activate
def test_verify_v2_reports_error_status_without_raising(resource_dir, capsys):
    responses.add(
        responses.POST,
        V2_URL,
        json={"error": "Compiler version not found"},
        status=400,
    )

    result = verify_v2(
        "0.0.1043",
        "testnet",
        "HelloWorld",
        "HelloWorld",
        "0.8.17+commit.8df45f5f",
        [],
        ContractResources(str(resource_dir)),
    )

    assert result.status_code == 400
    assert not result.accepted
    assert "Compiler version not found" in result.body
    assert len(responses.calls) == 1

    printed = capsys.readouterr().out
    assert "requestBody=" in printed
    assert "solcInput=" in printed
    assert "status=400" in printed
    assert "error=" in printed


@responses.activate
def test_verify_connection_error_raises_verification_error(resource_dir):
    responses.add(
        responses.POST,
        V1_URL,
        body=requests.exceptions.ConnectionError("connection refused"),
    )

    with pytest.raises(VerificationError, match="Connection error occurred"):
        verify_v1(
            "0.0.1043", "testnet", "HelloWorld", "HelloWorld", [], ContractResources(str(resource_dir))
        )


@responses.activate
def test_non_ascii_sources_are_posted_as_raw_utf8(resource_dir):
    responses.add(responses.POST, V1_URL, json={"result": []}, status=200)
    source = "// Grüße, señor\ncontract HelloWorld { string greeting; }"
    (resource_dir / "HelloWorld.sol").write_text(source, encoding="utf-8")

    verify_v1(
        "0.0.1043", "testnet", "HelloWorld", "HelloWorld", [], ContractResources(str(resource_dir))
    )

    sent = responses.calls[0].request.body
    assert "Grüße, señor".encode("utf-8") in sent
    assert b"\\u00fc" not in sent
    assert json.loads(sent)["files"]["HelloWorld"] == source
