"""Rule-based conversational shopping assistant over a static catalog."""
