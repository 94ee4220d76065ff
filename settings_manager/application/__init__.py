"""Application layer: records, codec, resolver service and provider ports."""
