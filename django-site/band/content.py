"""Static content displayed by the site."""

from band.domain import (
    ContactDetails,
    Member,
    Service,
    SiteContent,
    SocialLink,
    Song,
    Video,
)

SPOTIFY_TRACK = "https://open.spotify.com/track/YOUR_SPOTIFY_TRACK_ID"
MEMBER_PLACEHOLDER = "https://placehold.co/150x150/4a5568/e2e8f0?text=Miembro+{n}"

MEMBERS = (
    Member(
        img_src=MEMBER_PLACEHOLDER.format(n=1),
        name="Juan Pérez",
        role="Voz Principal / Guitarra",
        description="Apasionado por el rock clásico y las baladas pop. Aporta la energía y la emotividad al grupo.",
    ),
    Member(
        img_src=MEMBER_PLACEHOLDER.format(n=2),
        name="María García",
        role="Teclados / Coros",
        description="Experta en armonías de jazz y arreglos electrónicos. El cerebro detrás de los paisajes sonoros.",
    ),
    Member(
        img_src=MEMBER_PLACEHOLDER.format(n=3),
        name="Carlos Sánchez",
        role="Batería / Percusión",
        description="El corazón rítmico del grupo, con influencias de ritmos latinos y funk. Mantiene a todos en movimiento.",
    ),
)

SONGS = tuple(
    Song(
        title=title,
        description=description,
        audio_src=f"https://www.soundhelix.com/examples/mp3/SoundHelix-Song-{n}.mp3",
        spotify_link=SPOTIFY_TRACK,
    )
    for n, (title, description) in enumerate(
        [
            ("Fuerza Interior (Rock)", "Un himno de rock enérgico con riffs potentes y letras inspiradoras."),
            ("Sueños Compartidos (Pop Acústico)", "Una melodía pop suave y emotiva, perfecta para momentos de reflexión."),
            ("Noches de Blues (Jazz Fusión)", "Una pieza instrumental que fusiona el jazz con toques de blues y funk."),
            ("Raíces Andinas (Folclore Moderno)", "Una reinterpretación moderna de ritmos folclóricos con instrumentos tradicionales."),
            ("Pulso Urbano (Electrónica Experimental)", "Un viaje sonoro a través de texturas electrónicas y ritmos innovadores."),
            ("Alma en Vuelo (Balada Soul)", "Una balada conmovedora con influencias de soul y R&B, ideal para momentos íntimos."),
        ],
        start=1,
    )
)

VIDEOS = (
    Video(
        youtube_embed_url="https://www.youtube.com/embed/dQw4w9WgXcQ",
        title="Concierto en Vivo - Festival de Verano",
        description="Revive la energía de nuestra presentación en el Festival de Verano, mostrando nuestra faceta más rockera.",
    ),
    Video(
        youtube_embed_url="https://www.youtube.com/embed/M_g3t32r2b8",
        title="Sesión Acústica Íntima - Melodías al Atardecer",
        description="Una versión despojada y emotiva de nuestras canciones, mostrando la calidez de nuestras voces e instrumentos.",
    ),
)

SERVICES = (
    Service(
        icon="🎉",
        title="Bodas y Celebraciones",
        description="Desde la ceremonia hasta la fiesta, creamos el ambiente musical ideal para tu día especial.",
        features=("Música en vivo para la ceremonia", "Recepción y cóctel", "Fiesta bailable con repertorio variado"),
    ),
    Service(
        icon="🏢",
        title="Eventos Corporativos",
        description="Profesionalismo y versatilidad para conferencias, lanzamientos de productos y cenas de gala.",
        features=("Música de fondo elegante", "Show principal dinámico", "Sets personalizados para la marca"),
    ),
    Service(
        icon="🎤",
        title="Festivales y Conciertos",
        description="Llevamos nuestra energía y diversidad musical a grandes escenarios y audiencias.",
        features=(
            "Actuaciones en vivo de alto impacto",
            "Repertorio adaptado al público del festival",
            "Experiencia en grandes producciones",
        ),
    ),
    Service(
        icon="🏡",
        title="Fiestas Privadas",
        description="Haz de tu fiesta una experiencia inolvidable con un repertorio a tu medida.",
        features=("Cumpleaños, aniversarios, reuniones", "Música para bailar y disfrutar", "Interacción con los invitados"),
    ),
    Service(
        icon="🎨",
        title="Eventos Temáticos",
        description="Creamos sets especiales para noches temáticas: retro, jazz club, rock tribute, etc.",
        features=("Repertorio y vestuario acorde al tema", "Ambiente inmersivo", "Experiencia única y personalizada"),
    ),
    Service(
        icon="✨",
        title="Paquetes Personalizados",
        description="Ofrecemos opciones flexibles para adaptarnos a tu visión y presupuesto.",
        features=(
            "Duración del show ajustable",
            "Número de músicos",
            "Repertorio a medida",
            "Servicios de sonido e iluminación (opcional)",
        ),
    ),
)

CONTACT = ContactDetails(
    intro_text=(
        "¿Listo para llevar la música de Vintage Group a tu próximo evento? "
        "Completa el formulario a continuación o contáctanos directamente."
    ),
    email="contacto@vintagegroup.com",
    phone="+5917XXXXXXXX",
    social_links=(
        SocialLink(
            href="https://www.facebook.com/vintagegroup.bol",
            icon_src="https://placehold.co/40x40/3b5998/ffffff?text=FB",
            alt="Facebook Icon",
        ),
        SocialLink(
            href="https://instagram.com/vintagegroup",
            icon_src="https://placehold.co/40x40/c13584/ffffff?text=IG",
            alt="Instagram Icon",
        ),
        SocialLink(
            href="https://youtube.com/vintagegroup",
            icon_src="https://placehold.co/40x40/ff0000/ffffff?text=YT",
            alt="YouTube Icon",
        ),
    ),
)

SITE_CONTENT = SiteContent(
    band_name="Vintage Group",
    hero_subtitle=(
        "Tu banda sonora para cada momento. Ritmos que te harán vibrar, melodías que te emocionarán."
    ),
    hero_background="https://placehold.co/1920x1080/1a202c/e2e8f0?text=Vintage+Group",
    about_description=(
        "Vintage Group nació de la pasión compartida por la música y el deseo de explorar un universo "
        "sonoro sin límites. Desde nuestros inicios en [Año de Fundación], hemos crecido y evolucionado, "
        "fusionando géneros y creando experiencias musicales únicas. Nuestra versatilidad es nuestro sello. "
        "Nos movemos con facilidad entre el potente Rock, la energía del Pop, la sofisticación del Jazz, "
        "la riqueza del Folclore y la modernidad de la Electrónica. Esta diversidad nos permite adaptarnos "
        "a cualquier ambiente y evento, garantizando siempre una conexión profunda con nuestra audiencia. "
        "Creemos que la música es un lenguaje universal que une a las personas, y estamos comprometidos a "
        "ofrecer actuaciones memorables que dejen una huella duradera."
    ),
    music_intro=(
        "Explora nuestra discografía y sumérgete en la diversidad de nuestros sonidos. "
        "Aquí encontrarás una muestra de los estilos que dominamos."
    ),
    services_intro=(
        "Vintage Group está listo para darle vida a tu evento con la banda sonora perfecta. "
        "Nos adaptamos a tus necesidades para crear una experiencia inolvidable."
    ),
    services_cta_text=(
        "¿Tienes una idea diferente? ¡Nos encanta la creatividad! Contáctanos y diseñemos juntos "
        "la experiencia musical perfecta para tu evento."
    ),
    members=MEMBERS,
    songs=SONGS,
    videos=VIDEOS,
    services=SERVICES,
    contact=CONTACT,
)
