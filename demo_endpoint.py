"""
Quick demo script to run the Contractor Risk API locally.

This script starts a local server and shows how to make requests to it.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Contractor Risk Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:     GET  http://localhost:8000/health")
    print("   - Contractors:      GET  http://localhost:8000/contractors")
    print("   - Recommendations:  POST http://localhost:8000/recommendations")
    print("   - API Docs:              http://localhost:8000/docs")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/recommendations" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"name": "Alice", "project_description": "Data migration", '
          '"access_level": "admin", "application": "CRM", "has_prod_access": true}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "contractor_risk.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
