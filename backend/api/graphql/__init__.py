"""Strawberry GraphQL schema for walking tracking."""
