"""Localized strings shown by the header, the chat widget and its replies.

Every key carries an entry for each supported language.
"""

from __future__ import annotations

MESSAGES: dict[str, dict[str, str]] = {
    # Header navigation
    "nav.shop": {"en": "Shop", "pt": "Loja", "es": "Tienda", "fr": "Boutique"},
    "nav.dashboard": {"en": "Dashboard", "pt": "Painel", "es": "Panel", "fr": "Tableau de bord"},
    "nav.refs": {"en": "Refs", "pt": "Indicações", "es": "Referidos", "fr": "Parrainages"},
    "nav.reminders": {"en": "Reminders", "pt": "Lembretes", "es": "Recordatorios", "fr": "Rappels"},
    "nav.profile": {"en": "Profile", "pt": "Perfil", "es": "Perfil", "fr": "Profil"},
    "nav.signin": {"en": "Sign in", "pt": "Entrar", "es": "Iniciar sesión", "fr": "Se connecter"},
    "nav.signout": {"en": "Sign out", "pt": "Sair", "es": "Cerrar sesión", "fr": "Se déconnecter"},
    # Chat widget chrome
    "chat.title": {
        "en": "Zolarus Assistant",
        "pt": "Assistente Zolarus",
        "es": "Asistente Zolarus",
        "fr": "Assistant Zolarus",
    },
    "chat.greeting": {
        "en": "Hi! I can explain Zolarus and guide you through reminders and shopping. Ask me anything.",
        "pt": "Olá! Posso explicar o Zolarus e orientar você com lembretes e compras. Pergunte-me qualquer coisa.",
        "es": "¡Hola! Puedo explicar Zolarus y ayudarte con recordatorios y compras. Pregúntame lo que quieras.",
        "fr": "Salut ! Je peux expliquer Zolarus et vous guider avec les rappels et les achats. Posez-moi vos questions.",
    },
    "chat.greeting_named": {
        "en": "Hi {name}! I can explain Zolarus and guide you through reminders and shopping. Ask me anything.",
        "pt": "Olá {name}! Posso explicar o Zolarus e orientar você com lembretes e compras. Pergunte-me qualquer coisa.",
        "es": "¡Hola {name}! Puedo explicar Zolarus y ayudarte con recordatorios y compras. Pregúntame lo que quieras.",
        "fr": "Salut {name} ! Je peux expliquer Zolarus et vous guider avec les rappels et les achats. Posez-moi vos questions.",
    },
    "chat.placeholder": {
        "en": "Ask about reminders, shop, or referrals…",
        "pt": "Pergunte sobre lembretes, loja ou indicações…",
        "es": "Pregunta sobre recordatorios, tienda o referencias…",
        "fr": "Demandez des rappels, la boutique ou les parrainages…",
    },
    "chat.send": {"en": "Send", "pt": "Enviar", "es": "Enviar", "fr": "Envoyer"},
    # Suggestion chips, in display order
    "chip.create_reminder": {
        "en": "how do I create a reminder?",
        "pt": "como criar um lembrete?",
        "es": "¿cómo crear un recordatorio?",
        "fr": "comment créer un rappel ?",
    },
    "chip.why_profile": {
        "en": "why complete my profile?",
        "pt": "por que completar meu perfil?",
        "es": "¿por qué completar mi perfil?",
        "fr": "pourquoi compléter mon profil ?",
    },
    "chip.open_reminders": {
        "en": "open reminders",
        "pt": "abrir lembretes",
        "es": "abrir recordatorios",
        "fr": "ouvrir rappels",
    },
    "chip.go_shop": {
        "en": "go to shop",
        "pt": "ir à loja",
        "es": "ir a la tienda",
        "fr": "aller à la boutique",
    },
    "chip.referrals": {
        "en": "referrals",
        "pt": "indicações",
        "es": "referencias",
        "fr": "parrainages",
    },
    "chip.dashboard": {
        "en": "back to dashboard",
        "pt": "voltar ao painel",
        "es": "volver al panel",
        "fr": "retour au tableau de bord",
    },
    # Navigation replies
    "reply.open_reminders": {
        "en": "Opening Reminders…",
        "pt": "Abrindo Lembretes…",
        "es": "Abriendo Recordatorios…",
        "fr": "Ouverture des rappels…",
    },
    "reply.open_shop": {
        "en": "Opening the Shop…",
        "pt": "Abrindo a Loja…",
        "es": "Abriendo la Tienda…",
        "fr": "Ouverture de la boutique…",
    },
    "reply.shop_query": {
        "en": "Opening the Shop with your search…",
        "pt": "Abrindo a Loja com a sua busca…",
        "es": "Abriendo la Tienda con tu búsqueda…",
        "fr": "Ouverture de la boutique avec votre recherche…",
    },
    "reply.back_dashboard": {
        "en": "Back to your Dashboard…",
        "pt": "Voltando ao Painel…",
        "es": "Volviendo al Panel…",
        "fr": "Retour au tableau de bord…",
    },
    "reply.open_profile": {
        "en": "Opening your Profile…",
        "pt": "Abrindo seu Perfil…",
        "es": "Abriendo tu Perfil…",
        "fr": "Ouverture de votre profil…",
    },
    "reply.open_referrals": {
        "en": "Opening Referrals…",
        "pt": "Abrindo Indicações…",
        "es": "Abriendo Referencias…",
        "fr": "Ouverture des parrainages…",
    },
    # Explanations
    "explain.profile": {
        "en": "Completing your profile adds your name and optional phone so reminders and greetings feel personal. It’s quick and helps Zolarus tailor messages for you.",
        "pt": "Completar seu perfil adiciona seu nome e telefone opcional para que lembretes e mensagens fiquem mais pessoais. É rápido e ajuda o Zolarus a personalizar a experiência.",
        "es": "Completar tu perfil agrega tu nombre y teléfono opcional para que los recordatorios sean más personales. Es rápido y ayuda a Zolarus a personalizar tu experiencia.",
        "fr": "Compléter votre profil ajoute votre nom et téléphone optionnel afin que les rappels soient plus personnels. C’est rapide et aide Zolarus à personnaliser votre expérience.",
    },
    "explain.referrals": {
        "en": "Referrals help you earn Zola Credits! Share your unique link under Referrals (purple circle on your dashboard). Soon every new signup you bring will count toward your credits.",
        "pt": "As indicações ajudam você a ganhar Créditos Zola! Compartilhe o link em Indicações (o círculo roxo no painel). Em breve, cada novo usuário que você indicar começará a contar para seus créditos.",
        "es": "¡Las referencias te ayudan a ganar Créditos Zola! Comparte tu enlace en Referencias (el círculo morado en el panel). Pronto cada nuevo usuario que traigas contará para tus créditos.",
        "fr": "Les parrainages vous font gagner des Crédits Zola ! Partagez le lien sous Parrainages (le cercle violet sur le tableau). Bientôt, chaque nouvel inscrit comptera pour vos crédits.",
    },
    # Page-specific help
    "help.reminders": {
        "en": "To create a reminder, fill in Title (like “Mom’s birthday”), choose a date and time, then click Save reminder. You’ll get an email at the right time, and you can come back to find a budget-friendly gift in the shop.",
        "pt": "Para criar um lembrete, preencha o Título (por exemplo, “Aniversário da mãe”), escolha a data e hora e clique em Salvar lembrete. Você receberá um e-mail no momento certo e pode voltar para comprar um presente dentro do seu orçamento.",
        "es": "Para crear un recordatorio, completa el Título (por ejemplo “Cumpleaños de mamá”), elige la fecha y hora, y haz clic en Guardar recordatorio. Recibirás un correo a tiempo y puedes volver para comprar un regalo ajustado a tu presupuesto.",
        "fr": "Pour créer un rappel, remplissez le Titre (ex. “Anniversaire de maman”), choisissez la date et l’heure, puis cliquez sur Enregistrer le rappel. Vous recevrez un e-mail au bon moment et pourrez revenir trouver un cadeau adapté à votre budget.",
    },
    "help.profile": {
        "en": "This is your profile. Add your full name and, if you like, a phone number, then save. Your name is used to personalize reminders and greetings.",
        "pt": "Este é o seu perfil. Adicione seu nome completo e, se quiser, um telefone, e salve. Seu nome é usado para personalizar lembretes e mensagens.",
        "es": "Este es tu perfil. Agrega tu nombre completo y, si quieres, un teléfono, y guarda. Tu nombre se usa para personalizar recordatorios y saludos.",
        "fr": "Voici votre profil. Ajoutez votre nom complet et, si vous le souhaitez, un téléphone, puis enregistrez. Votre nom sert à personnaliser les rappels et les messages.",
    },
    "help.referrals": {
        "en": "Here you can copy your referral link and see how many people joined through it. Every signup you bring counts toward your Zola Credits.",
        "pt": "Aqui você pode copiar seu link de indicação e ver quantas pessoas entraram por ele. Cada cadastro que você trouxer conta para seus Créditos Zola.",
        "es": "Aquí puedes copiar tu enlace de referencia y ver cuántas personas se unieron con él. Cada registro que traigas cuenta para tus Créditos Zola.",
        "fr": "Ici, vous pouvez copier votre lien de parrainage et voir combien de personnes l’ont utilisé. Chaque inscription compte pour vos Crédits Zola.",
    },
    "help.shop": {
        "en": "Here you can compare prices across stores for gifts and everyday items. Type who it’s for and your budget, and I’ll surface the best deals.",
        "pt": "Aqui você pode comparar preços entre lojas para presentes e compras do dia a dia. Digite para quem é e o seu orçamento, e eu mostrarei as melhores opções.",
        "es": "Aquí puedes comparar precios entre tiendas para regalos y compras cotidianas. Escribe para quién es y tu presupuesto, y te mostraré las mejores opciones.",
        "fr": "Ici, vous pouvez comparer les prix entre boutiques pour des cadeaux et achats quotidiens. Indiquez pour qui et votre budget, et je vous montrerai les meilleures offres.",
    },
    "reply.fallback": {
        "en": "I can guide you through reminders, your profile, or the shop. Try “gift for mom under $50”, “how do I create a reminder?” or “referrals” to learn how to earn Zola Credits.",
        "pt": "Posso orientar você sobre lembretes, perfil ou loja. Tente “presente para mãe até $50”, “como criar um lembrete?” ou “indicações” para saber como ganhar Créditos Zola.",
        "es": "Puedo guiarte sobre recordatorios, perfil o tienda. Prueba “regalo para mamá menos de $50”, “¿cómo crear un recordatorio?” o “referencias” para aprender cómo ganar Créditos Zola.",
        "fr": "Je peux vous guider sur les rappels, le profil ou la boutique. Essayez “cadeau pour maman moins de $50”, “comment créer un rappel ?” ou “parrainages” pour apprendre à gagner des Crédits Zola.",
    },
    # Guest limiter and terms
    "guest.limit_reached": {
        "en": "You’ve used your free searches. Sign in to keep shopping.",
        "pt": "Você usou suas buscas gratuitas. Entre para continuar comprando.",
        "es": "Ya usaste tus búsquedas gratuitas. Inicia sesión para seguir comprando.",
        "fr": "Vous avez utilisé vos recherches gratuites. Connectez-vous pour continuer.",
    },
    "terms.accept": {
        "en": "I agree",
        "pt": "Eu concordo",
        "es": "Acepto",
        "fr": "J’accepte",
    },
}

CHIP_KEYS: tuple[str, ...] = (
    "chip.create_reminder",
    "chip.why_profile",
    "chip.open_reminders",
    "chip.go_shop",
    "chip.referrals",
    "chip.dashboard",
)
