"""EIP-712 hashing and signing for TokenERC20 signature-mint requests.

Hashes are computed field by field so they match the contract byte for byte:

    domainSeparator = keccak256(abi.encode(
        DOMAIN_TYPEHASH, keccak256(name), keccak256(version), chainId, verifyingContract))
    structHash      = keccak256(abi.encode(MINT_REQUEST_TYPEHASH, to, primarySaleRecipient,
        quantity, price, currency, validityStartTimestamp, validityEndTimestamp, uid))
    digest          = keccak256(0x19 0x01 ‖ domainSeparator ‖ structHash)

Stateless: every function is pure over its inputs.
"""

from dataclasses import dataclass

from eth_abi import encode
from eth_account import Account
from eth_account.messages import SignableMessage
from eth_utils import keccak, to_checksum_address

from src.tg_common.errors import ParseError, SignatureMismatchError
from src.tg_erc20.domain.models import MintRequest

DOMAIN_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "string"),
    ("version", "string"),
    ("chainId", "uint256"),
    ("verifyingContract", "address"),
)

MINT_REQUEST_FIELDS: tuple[tuple[str, str], ...] = (
    ("to", "address"),
    ("primarySaleRecipient", "address"),
    ("quantity", "uint256"),
    ("price", "uint256"),
    ("currency", "address"),
    ("validityStartTimestamp", "uint128"),
    ("validityEndTimestamp", "uint128"),
    ("uid", "bytes32"),
)


def encode_type(primary_type: str, fields: tuple[tuple[str, str], ...]) -> str:
    """'MintRequest(address to,address primarySaleRecipient,...)'."""
    return f"{primary_type}({','.join(f'{t} {n}' for n, t in fields)})"


DOMAIN_TYPEHASH = keccak(text=encode_type("EIP712Domain", DOMAIN_FIELDS))
MINT_REQUEST_TYPEHASH = keccak(text=encode_type("MintRequest", MINT_REQUEST_FIELDS))

EIP712_VERSION_BYTE = b"\x01"

# Part of the signing domain the TokenERC20 contract hashes; fixed on-chain
EIP712_DOMAIN_VERSION = "1"


@dataclass(frozen=True)
class SigningDomain:
    name: str
    version: str
    chain_id: int
    verifying_contract: str


def domain_separator(domain: SigningDomain) -> bytes:
    return keccak(
        encode(
            ["bytes32", "bytes32", "bytes32", "uint256", "address"],
            [
                DOMAIN_TYPEHASH,
                keccak(text=domain.name),
                keccak(text=domain.version),
                domain.chain_id,
                to_checksum_address(domain.verifying_contract),
            ],
        )
    )


def struct_hash(req: MintRequest) -> bytes:
    types = ["bytes32"] + [abi_type for _, abi_type in MINT_REQUEST_FIELDS]
    values = [
        MINT_REQUEST_TYPEHASH,
        to_checksum_address(req.to),
        to_checksum_address(req.primary_sale_recipient),
        req.quantity,
        req.price,
        to_checksum_address(req.currency),
        req.validity_start_timestamp,
        req.validity_end_timestamp,
        req.uid,
    ]
    return keccak(encode(types, values))


def signable_message(domain: SigningDomain, req: MintRequest) -> SignableMessage:
    return SignableMessage(
        version=EIP712_VERSION_BYTE,
        header=domain_separator(domain),
        body=struct_hash(req),
    )


def typed_data_digest(domain: SigningDomain, req: MintRequest) -> bytes:
    """The 32-byte hash the signature commits to."""
    return keccak(b"\x19" + EIP712_VERSION_BYTE + domain_separator(domain) + struct_hash(req))


def sign_mint_request(
    domain: SigningDomain, req: MintRequest, private_key: str | bytes
) -> bytes:
    """Sign with a raw private key. Returns 65 bytes r ‖ s ‖ v."""
    try:
        signed = Account.sign_message(signable_message(domain, req), private_key=private_key)
    except (ValueError, TypeError):
        # Never echo the key
        raise ParseError("invalid signing key") from None
    return bytes(signed.signature)


def recover_signer(domain: SigningDomain, req: MintRequest, signature: bytes) -> str:
    """Checksummed address that produced `signature` over (domain, req)."""
    try:
        return Account.recover_message(signable_message(domain, req), signature=signature)
    except Exception as exc:
        raise SignatureMismatchError(f"signature does not recover: {exc}") from exc
