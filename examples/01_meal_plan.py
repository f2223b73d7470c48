"""01 — Meal Plan (structured output).

Send the built-in meal-plan request and print the raw JSON, the decoded
value, the finish reason and token usage. Reads GEMINI_API_KEY from the
environment or a .env file.
"""

from gemini_structured import main

main()
