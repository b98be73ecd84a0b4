"""Prompt templates for the research, brief and site generation stages."""

RESEARCH_PROMPT = """You are a web design researcher. Quickly analyze {category} websites in {location}.

BUSINESS:
{business_context}

WHAT WE ALREADY KNOW ABOUT THE BRAND:
{provenance_notes}

Provide CONCISE recommendations for:
1. Color palette (5 hex codes: primary, secondary, accent, background, text)
2. Fonts (Google Fonts: heading + body)
3. Key sections to include
4. Unique angle for {business_name}

Respect every value marked as requested by the client or taken from their existing branding.
Be brief but specific. Output should be under 500 words."""


BRIEF_PROMPT = """Create a concise design brief for {business_name} ({category} in {location}).

BRAND PROFILE:
{brand_context}

RESEARCH INSIGHTS:
{research}

OUTPUT A BRIEF DESIGN SPEC:
1. COLORS: 5 hex codes (primary, secondary, accent, background, text)
2. FONTS: Google Fonts (heading + body)
3. HERO: Style (full-bleed/split/minimal/centered/asymmetric) + headline suggestion
4. SECTIONS: List in order with one-line purpose
5. CTA: Primary call-to-action text

Keep response under 400 words. Be specific with hex codes and font names."""


SITE_PROMPT = """You are an expert frontend developer creating a production-ready website.

## THE CLIENT
{business_name} - a {category} in {location}

## BRAND PROFILE
{brand_context}

## DESIGN BRIEF
{brief}

---

## YOUR TASK

Create a complete, production-ready HTML website that:

1. **Follows the design brief and brand profile EXACTLY** - Use the exact colors, fonts, and layout specified
2. **Is fully responsive** - Works on mobile, tablet, and desktop
3. **Looks professional** - Premium agency quality
4. **Has smooth interactions** - Subtle hover effects, smooth scrolling
5. **Is self-contained** - All CSS in a <style> tag, no external dependencies except:
   - Google Fonts (import the fonts specified)
   - Font Awesome 6 for icons (https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.4.0/css/all.min.css)

## CRITICAL REQUIREMENTS

- **ONE-PAGE SITE** - All content lives in a single document.
- **ANCHOR LINKS ONLY** - Every navigation link MUST be an in-page anchor (e.g. href="#about", href="#contact"). Never link to separate pages.
- **NO EMOJIS** - Use Font Awesome icons only.
- **NO PLACEHOLDER TEXT** - Use the actual business name, services, and contact details provided.
- **CONTACT FORM** - Include a contact form that posts to "#".
- **SOCIAL LINKS** - Link icons to the social profiles listed, if any.
- **FOOTER** - No links to privacy policy, terms, or other pages. Social links and contact details only.

## SECTIONS TO INCLUDE
1. Navigation
2. Hero section with headline, tagline, and primary call to action
3. About
4. Services
5. Why choose us / trust signals
6. Testimonials or social proof
7. Contact section with form
8. Footer
{extra_sections}

## OUTPUT FORMAT
Return ONLY the complete HTML document. Start with <!DOCTYPE html> and end with </html>.
No explanations, no markdown code blocks."""


# ============================================================================
# PROVENANCE AND DESCRIPTION TABLES
# ============================================================================

COLOR_PROVENANCE = {
    'user': 'specifically requested by the client',
    'social': 'extracted from their social media branding',
    'markup': 'extracted from their existing website',
    'competitors': 'identified as industry-appropriate from competitor analysis',
    'default': 'selected as industry-appropriate defaults',
}

FONT_PROVENANCE = {
    'markup': 'extracted from their existing website to maintain brand consistency',
    'competitors': 'identified as effective in this industry',
    'default': 'selected as industry-appropriate defaults',
}

LAYOUT_PROVENANCE = {
    'markup': 'inspired by their existing website structure',
    'competitors': 'identified as effective in this industry',
    'default': 'selected as appropriate for this business type',
}

TONE_PROVENANCE = {
    'user': 'chosen by the client',
    'social': 'inferred from their social media voice',
    'markup': 'inferred from their website copy',
    'default': 'typical for this industry',
}

HERO_DESCRIPTIONS = {
    'full-bleed': 'Full-screen hero image covering the viewport with overlaid text',
    'split': 'Hero split 50/50 with content on one side and image on the other',
    'minimal': 'Clean, text-focused hero with minimal imagery and lots of whitespace',
    'centered': 'Centered content hero with image below or as a subtle background',
    'asymmetric': 'Asymmetric layout with offset elements and dynamic composition',
}

NAV_DESCRIPTIONS = {
    'fixed': 'Fixed navigation bar that stays at the top when scrolling',
    'hidden': 'Hamburger menu navigation for a clean look',
    'transparent': 'Transparent navigation that becomes solid on scroll',
    'simple': 'Simple navigation with essential links only',
}

DENSITY_DESCRIPTIONS = {
    'spacious': 'lots of whitespace between sections',
    'compact': 'tighter spacing, more content visible',
    'moderate': 'balanced spacing',
}

TONE_DESCRIPTIONS = {
    'professional': 'Confident, trustworthy, expert language',
    'casual': 'Friendly, approachable, relaxed language',
    'luxurious': 'Sophisticated, exclusive, refined language',
    'fun': 'Playful, energetic, exciting language',
    'minimal': 'Simple, direct, clean language',
    'warm': 'Welcoming, caring, personal language',
    'bold': 'Strong, confident, impactful language',
    'elegant': 'Graceful, refined, tasteful language',
}

COPY_DESCRIPTIONS = {
    'formal': 'Professional, structured sentences',
    'conversational': 'Natural, friendly dialogue style',
    'direct': 'Short, punchy, action-oriented',
    'storytelling': 'Narrative, emotional, engaging',
}
