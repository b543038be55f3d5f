"""HTTP adapter: dependencies, schemas and routers."""
