"""Erc20Signature: generate, verify and mint signed mint vouchers locally.

generate signs with the explicit key, else the ambient signer key from
settings. verify and mint recompute the EIP-712 hash, recover the signer and
compare it with the signer the contract recovers through its own `verify`.
Any difference means the two sides hash differently; that is raised as
SignatureMismatchError and never retried. Business-rule validity (uid reuse,
validity window, minter role) is the contract's verdict.
"""

import logging

from eth_utils import encode_hex

from src.tg_common.constants import is_zero_address
from src.tg_common.errors import SignatureMismatchError, UnsupportedOperationError
from src.tg_contract.application.writes import submit_write
from src.tg_contract.context import SdkContext
from src.tg_contract.domain.models import ContractCall, TransactionResult
from src.tg_erc20.domain.eip712 import (
    EIP712_DOMAIN_VERSION,
    SigningDomain,
    recover_signer,
    sign_mint_request,
)
from src.tg_erc20.domain.models import MintPayload, MintRequest, SignedPayload
from src.tg_erc20.domain.pricing import payable_value
from src.tg_erc20.domain.voucher import (
    build_mint_request,
    decode_signature,
    request_from_signed,
    to_signed_output,
)

logger = logging.getLogger(__name__)


class Erc20Signature:
    def __init__(self, context: SdkContext, contract_address: str) -> None:
        self._reader = context.reader
        self._writer = context.writer
        self._wallet = context.wallet
        self._ambient_key = context.signer_private_key
        self._address = contract_address

    async def generate(
        self, payload: MintPayload, private_key: str | None = None
    ) -> SignedPayload:
        """Build and sign a MintRequest. Requires the minter role on-chain to redeem."""
        key = private_key or self._ambient_key
        if not key:
            raise UnsupportedOperationError("signature.generate without a signing key")

        recipient = payload.primary_sale_recipient
        if is_zero_address(recipient):
            recipient = await self._reader.read(
                self._address, ContractCall("primarySaleRecipient")
            )
        req = build_mint_request(payload, recipient)
        domain = await self._domain()
        signature = sign_mint_request(domain, req, key)
        logger.info(
            "Signed mint request: contract=%s to=%s uid=%s",
            self._address,
            req.to,
            encode_hex(req.uid),
        )
        return SignedPayload(signature=encode_hex(signature), payload=to_signed_output(req))

    async def verify(self, signed: SignedPayload) -> bool:
        req = request_from_signed(signed)
        valid, _ = await self._verify_on_chain(req, decode_signature(signed.signature))
        return valid

    async def mint(self, signed: SignedPayload) -> TransactionResult:
        req = request_from_signed(signed)
        signature = decode_signature(signed.signature)
        await self._verify_on_chain(req, signature)
        return await submit_write(
            self._writer,
            self._address,
            ContractCall("mintWithSignature", (req.as_abi_tuple(), signature)),
            payable_value(req.quantity, req.price, req.currency),
        )

    async def recover(self, signed: SignedPayload) -> str:
        """Signer address recovered locally, without asking the contract."""
        req = request_from_signed(signed)
        domain = await self._domain()
        return recover_signer(domain, req, decode_signature(signed.signature))

    async def _domain(self) -> SigningDomain:
        name = await self._reader.read(self._address, ContractCall("name"))
        chain_id = await self._wallet.get_chain_id()
        return SigningDomain(
            name=name,
            version=EIP712_DOMAIN_VERSION,
            chain_id=chain_id,
            verifying_contract=self._address,
        )

    async def _verify_on_chain(self, req: MintRequest, signature: bytes) -> tuple[bool, str]:
        local_signer = recover_signer(await self._domain(), req, signature)
        valid, chain_signer = await self._reader.read(
            self._address, ContractCall("verify", (req.as_abi_tuple(), signature))
        )
        if chain_signer.lower() != local_signer.lower():
            logger.error(
                "EIP-712 hash disagreement: contract=%s local=%s chain=%s",
                self._address,
                local_signer,
                chain_signer,
            )
            raise SignatureMismatchError(
                f"contract recovered {chain_signer}, local hash recovered {local_signer}"
            )
        return bool(valid), local_signer
