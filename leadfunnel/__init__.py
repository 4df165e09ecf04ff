"""
Lead Funnel Orchestrator

Thin orchestration layer behind the marketing site: it forwards a visitor's
website URL to the analyzer service, optionally asks the builder service for a
redesigned homepage and its screenshot, and returns the combined result.

Layer Structure:
- Domain: Workflow entities, errors and gateway contracts
- Application: Use cases and DTOs
- Infrastructure: HTTP gateways and health probes for downstream services
- Presentation: FastAPI routers and bearer-token security
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
