"""APIpie catalog source and provider-config output."""
