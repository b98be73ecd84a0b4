"""FastAPI service exposing profile extraction and site generation."""
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from brandsite.agents.brand_orchestrator import BrandOrchestrator
from brandsite.agents.site_generator import SiteGenerator
from brandsite.agents.tools import GenerationError
from brandsite.app.config import get_settings
from brandsite.app.logger import logger, LOG_FILE
from brandsite.app.models import GenerateResponse, ProfileResponse, RawExtractionInput

app = FastAPI(
    title="Brandsite API",
    description="Fuse website, social and competitor signals into a brand profile and generate a site from it",
    version="0.1.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global services (initialized on startup)
brand_orchestrator = None
site_generator = None


@app.on_event("startup")
async def startup_event():
    """Initialize services on startup."""
    global brand_orchestrator, site_generator
    settings = get_settings()
    brand_orchestrator = BrandOrchestrator(settings)
    site_generator = SiteGenerator(settings=settings)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Brandsite API",
        "version": "0.1.0",
        "endpoints": ["/profile", "/generate"]
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/profile", response_model=ProfileResponse)
async def build_profile(request: RawExtractionInput):
    """Extract and fuse a Brand Profile without generating a site."""
    if brand_orchestrator is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    try:
        profile = await brand_orchestrator.extract(request)
        return ProfileResponse(profile=profile, sources=profile.sources())
    except Exception as e:
        logger.error(f"Error building profile: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error building profile: {str(e)}")


@app.post("/generate", response_model=GenerateResponse)
async def generate_site(request: RawExtractionInput):
    """Build the profile, generate the site and store it."""
    if brand_orchestrator is None or site_generator is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    try:
        profile, artifact = await brand_orchestrator.create_site(request, site_generator)
    except GenerationError as e:
        logger.error(f"Generation failed for {request.business_name}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=502, detail=f"Generation failed: {str(e)}")
    except Exception as e:
        logger.error(f"Error generating site: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error generating site: {str(e)}")

    return GenerateResponse(
        slug=artifact.slug,
        saved=artifact.saved,
        generation_time=artifact.generation_time,
        sources=profile.sources(),
        brief=artifact.brief,
        html=artifact.html,
    )


def main():
    """Main entry point for running the API server."""
    logger.info("Starting Brandsite API server...")
    logger.info(f"Log file: {LOG_FILE.absolute()}")
    uvicorn.run(
        "brandsite.app.main:app",
        host="0.0.0.0",
        port=8000,
        log_level="warning"
    )


if __name__ == "__main__":
    main()
