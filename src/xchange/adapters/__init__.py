"""
============================

Exchange Adapters.

============================

This package contains adapter implementations for individual exchanges.
Adapters translate exchange-specific REST payloads into the generic trading
model defined in the model package.

"""
