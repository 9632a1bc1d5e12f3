"""Seed and sample data for tags and generated translations."""

# Tags every environment starts with
STANDARD_TAGS = [
    'web', 'mobile', 'desktop', 'api', 'frontend', 'backend',
    'auth', 'profile', 'settings', 'dashboard', 'navigation',
    'error', 'success', 'warning', 'info', 'validation',
    'form', 'button', 'modal', 'tooltip', 'menu',
]

# Locales used by the populate script
SAMPLE_LOCALES = ['en', 'fr', 'es', 'de', 'it', 'pt', 'ru', 'zh', 'ja', 'ko']

KEY_PREFIXES = [
    'common', 'auth', 'profile', 'settings', 'dashboard',
    'navigation', 'forms', 'buttons', 'messages', 'errors',
]

KEY_SUFFIXES = [
    'title', 'description', 'label', 'placeholder', 'button',
    'message', 'error', 'success', 'warning', 'info',
]

# Locales without templates fall back to 'en'
CONTENT_TEMPLATES = {
    'en': [
        'Welcome to our application',
        'Please enter your information',
        'Save changes successfully',
        'An error occurred',
        'Click here to continue',
        'Your profile has been updated',
        'Please confirm your action',
        'Loading content...',
        'No results found',
        'Thank you for using our service',
    ],
    'fr': [
        'Bienvenue dans notre application',
        'Veuillez saisir vos informations',
        'Modifications sauvegardées avec succès',
        "Une erreur s'est produite",
        'Cliquez ici pour continuer',
        'Votre profil a été mis à jour',
        'Veuillez confirmer votre action',
        'Chargement du contenu...',
        'Aucun résultat trouvé',
        "Merci d'utiliser notre service",
    ],
    'es': [
        'Bienvenido a nuestra aplicación',
        'Por favor ingrese su información',
        'Cambios guardados exitosamente',
        'Ocurrió un error',
        'Haga clic aquí para continuar',
        'Su perfil ha sido actualizado',
        'Por favor confirme su acción',
        'Cargando contenido...',
        'No se encontraron resultados',
        'Gracias por usar nuestro servicio',
    ],
}
