"""Stayli Vacation Rental Platform."""

from ..core import Project, ProjectAbout, WorkCategory
from ..images import build_large_image, build_secondary_image
from ..registry import register_work

register_work(
    Project(
        id="stayli-vacation-rental-platform",
        title="Stayli Vacation Rental Platform",
        description=(
            "Modern vacation rental marketplace connecting travelers with extraordinary stays "
            "worldwide, featuring property listings and seamless booking experience."
        ),
        category=WorkCategory.PRODUCTS,
        thumbnail_image=(
            "https://cdn.prod.website-files.com/6811ad3e11282304843a1ca2/"
            "6811ad3e11282304843a1e18_stayli-black-logo.svg"
        ),
        hero_image=build_large_image(
            "/Realestate/work/Hero.png",
            "Stayli Platform Hero",
        ),
        secondary_image=build_secondary_image(
            "/Realestate/work/secondary.png",
            "Stayli Property Listings Interface",
        ),
        about=ProjectAbout(
            client="Stayli",
            contribution="Full-Stack Development, UI/UX Implementation, Dynamic Routing",
            year="2024",
        ),
        full_description=(
            "A comprehensive vacation rental platform built for Stayli, featuring multiple "
            "pages including Home, About, Listings, Property Details, and Contact. The "
            "platform showcases curated vacation rentals ranging from urban lofts to "
            "beachfront villas, mountain cabins, and luxury suites. Built with Next.js App "
            "Router architecture to deliver dynamic property browsing, detailed listing pages "
            "with image galleries, amenity showcases, and integrated booking forms. The "
            "platform serves diverse travelers seeking budget-friendly options to high-end "
            "luxury retreats with intuitive search and filtering capabilities."
        ),
        process_image=build_secondary_image(
            "/Realestate/work/Processing.png",
            "Stayli Development Process",
        ),
        problem_title="The Challenge",
        problem_description=(
            "Stayli needed a digital marketplace to bridge the gap between travelers seeking "
            "unique accommodations and property owners offering exceptional stays. The "
            "challenge was to create a scalable platform that could effectively showcase "
            "diverse property types—from $95 mountain cabins to $210 beachfront "
            "suites—while maintaining consistent user experience across property "
            "categories. The platform needed to handle dynamic routing for individual property "
            "pages, support multiple property attributes (bedrooms, guests, pricing, ratings), "
            "and present complex information in an accessible format.",
            "The website required clear presentation of property features including "
            "high-quality image galleries, detailed amenities lists, room type variations, "
            "location information, and guest reviews. Additionally, the platform needed FAQ "
            "sections for customer support, testimonial displays for social proof, destination "
            "exploration features, and contact forms for inquiries—all while maintaining "
            "optimal performance with image optimization, responsive design across all "
            "devices, and SEO-friendly architecture for property discoverability.",
        ),
        solution_title="The Solution",
        solution_description=(
            "Built with Next.js 14 and TypeScript, leveraging the App Router with dynamic "
            "routing patterns ([slug]) for scalable property detail pages. Implemented a "
            "robust data architecture using TypeScript interfaces for type-safe property "
            "management, including PropertyImage, PropertyAmenity, and Property models with "
            "comprehensive attributes (pricing, ratings, reviews, features, amenities). "
            "Created five core pages (Home, About, Listings, Property Detail, Contact) with "
            "dedicated component architecture for landing sections, listing displays, and "
            "property showcases.",
            "Designed a modular component system with reusable elements across hero sections, "
            "destination cards, testimonial displays, FAQ accordions, and call-to-action "
            "modules. Implemented responsive image handling with srcSet and sizes attributes "
            "for optimal loading performance across devices. Created dynamic property "
            "filtering by location, floor, size, and bedrooms with real-time search "
            "capabilities. Integrated property rating system (5-star reviews), discount "
            "badges, and multi-image carousels for property galleries. Deployed on Netlify "
            "with continuous deployment, achieving fast load times and seamless navigation "
            "between property listings and detail pages.",
        ),
        closing_image=build_large_image(
            "/Realestate/work/Footer.png",
            "Stayli Platform Final Product",
        ),
        external_link="https://realsttate.netlify.app/",
    )
)
