from barbershop.models.user import User
from barbershop.models.service import Service
from barbershop.models.team_member import TeamMember
from barbershop.models.testimonial import Testimonial
from barbershop.models.gallery_item import GalleryItem
from barbershop.models.post import Post
from barbershop.models.appointment import APPOINTMENT_STATUSES, Appointment
from barbershop.models.contact import Contact
