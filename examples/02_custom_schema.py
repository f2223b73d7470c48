"""02 — Custom Schema (async).

Build a request with your own schema and call the client asynchronously.
"""

import asyncio
import json
import os

from gemini_structured import (
    GeminiClient,
    GenerationConfig,
    GenerationRequest,
    Schema,
    SchemaType,
    decode_payload,
)

schema = Schema(
    type=SchemaType.ARRAY,
    items=Schema(
        type=SchemaType.OBJECT,
        properties={
            "title": Schema(type=SchemaType.STRING),
            "author": Schema(type=SchemaType.STRING),
            "year": Schema(type=SchemaType.INTEGER),
        },
        required=("title", "author"),
    ),
)

request = GenerationRequest(
    prompt="Recommend 3 classic science fiction novels.",
    generation_config=GenerationConfig(response_schema=schema, temperature=0.2),
)


async def _main() -> None:
    client = GeminiClient("gemini-1.5-flash", os.environ.get("GEMINI_API_KEY", ""))
    result = await client.agenerate_content(request)
    decoded = decode_payload(result.text)
    if decoded.ok:
        print(json.dumps(decoded.value, indent=2))
    print(f"Tokens — in: {result.usage.input_tokens}, out: {result.usage.output_tokens}")


asyncio.run(_main())
